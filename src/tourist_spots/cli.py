"""Command-line front end for browsing tourist spots."""

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any

from tourist_spots.adapters.catalog import StaticSpotCatalog, TomlSpotCatalogLoader
from tourist_spots.adapters.config import AppConfig
from tourist_spots.adapters.localization import Localizer
from tourist_spots.adapters.settings import JsonFileSettingsStore
from tourist_spots.application import FavoritesStore, LanguageService, SpotBrowsingService
from tourist_spots.domain.models import Category, Language, TouristSpot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliContext:
    """Collaborators shared by all subcommands for one invocation."""

    catalog: StaticSpotCatalog
    browsing: SpotBrowsingService
    favorites: FavoritesStore
    language_service: LanguageService
    localizer: Localizer

    @property
    def language(self) -> Language:
        return self.language_service.selected_language

    def t(self, key: str) -> str:
        return self.localizer.translate(key, self.language)


def build_context(config: AppConfig) -> CliContext:
    """Wire the catalog, stores and services described by the config."""
    catalog = TomlSpotCatalogLoader.load(config)
    settings = JsonFileSettingsStore(config.settings_file)
    return CliContext(
        catalog=catalog,
        browsing=SpotBrowsingService(catalog),
        favorites=FavoritesStore(),
        language_service=LanguageService(settings, config.language),
        localizer=Localizer(),
    )


def spot_to_dict(spot: TouristSpot, ctx: CliContext) -> dict[str, Any]:
    """Convert a spot to a JSON-serializable dict with a localized category label."""
    return {
        "id": str(spot.id),
        "name": spot.name,
        "description": spot.description,
        "image_name": spot.image_name,
        "latitude": spot.latitude,
        "longitude": spot.longitude,
        "category": spot.category.name.lower(),
        "category_label": ctx.localizer.category_label(spot.category, ctx.language),
        "is_favorite": ctx.favorites.is_favorite(spot),
    }


def format_spot_line(spot: TouristSpot, ctx: CliContext) -> str:
    """Format a spot as one line of the list screen."""
    label = ctx.localizer.category_label(spot.category, ctx.language)
    return f"  {spot.name} [{label}]\n    {spot.description}"


def format_spot_details(spot: TouristSpot, ctx: CliContext) -> str:
    """Format the detail screen of a spot."""
    label = ctx.localizer.category_label(spot.category, ctx.language)
    action = ctx.localizer.favorite_action_label(ctx.favorites.is_favorite(spot), ctx.language)
    return "\n".join(
        [
            spot.name,
            f"  {spot.description}",
            f"  {label}",
            f"  {spot.latitude:.4f}, {spot.longitude:.4f}",
            f"  image: {spot.image_name}",
            f"  [{action}]",
        ]
    )


def cmd_list(args: argparse.Namespace, ctx: CliContext) -> int:
    category = Category.parse(args.category) if args.category else None
    ctx.browsing.query = args.query
    ctx.browsing.selected_category = category
    spots = ctx.browsing.visible_spots()

    if args.json:
        print(json.dumps([spot_to_dict(s, ctx) for s in spots], indent=2, ensure_ascii=False))
        return 0

    print(f"{ctx.t('tourism_title')} - {ctx.localizer.category_label(category, ctx.language)}")
    if not spots:
        print(f"  {ctx.t('no_results')}")
        return 0
    for spot in spots:
        print(format_spot_line(spot, ctx))
    return 0


def cmd_show(args: argparse.Namespace, ctx: CliContext) -> int:
    spot = ctx.catalog.find_by_name(args.name)
    if spot is None:
        print(f"{ctx.t('no_results')}: {args.name}", file=sys.stderr)
        return 1
    print(format_spot_details(spot, ctx))
    return 0


def cmd_categories(args: argparse.Namespace, ctx: CliContext) -> int:  # noqa: ARG001
    for category in Category:
        print(f"  {category.name.lower()}: {ctx.localizer.category_label(category, ctx.language)}")
    return 0


def cmd_favorites(args: argparse.Namespace, ctx: CliContext) -> int:
    for name in args.names:
        spot = ctx.catalog.find_by_name(name)
        if spot is None:
            print(f"{ctx.t('no_results')}: {name}", file=sys.stderr)
            return 1
        ctx.favorites.toggle(spot)

    print(ctx.t("favorites_title"))
    favorites = ctx.favorites.list()
    if not favorites:
        print(f"  {ctx.t('no_favorites')}")
    for spot in favorites:
        print(f"  {spot.name}")
    return 0


def cmd_language(args: argparse.Namespace, ctx: CliContext) -> int:
    if args.code:
        ctx.language_service.set_language(args.code)

    print(ctx.t("language_settings"))
    for language in Language:
        marker = "*" if language == ctx.language else " "
        print(f" {marker} {language.code}: {language.display_name}")
    return 0


COMMANDS = {
    "list": cmd_list,
    "show": cmd_show,
    "categories": cmd_categories,
    "favorites": cmd_favorites,
    "language": cmd_language,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tourist-spots",
        description="Browse Taiwan tourist spots",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all spots
  tourist-spots list

  # Search by name within a category
  tourist-spots list --query 101 --category landmark_building

  # Show one spot
  tourist-spots show 日月潭

  # Toggle favorites for this session
  tourist-spots favorites 阿里山 日月潭

  # Switch the display language
  tourist-spots language en
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    list_parser = subparsers.add_parser("list", help="List spots, optionally filtered")
    list_parser.add_argument("--query", default="", help="Text the spot name must contain")
    list_parser.add_argument(
        "--category", default=None, help="Category: nature, landmark_building, history, religion"
    )
    list_parser.add_argument("--json", action="store_true", help="Output as JSON")

    show_parser = subparsers.add_parser("show", help="Show details of a spot")
    show_parser.add_argument("name", help="Exact spot name")

    subparsers.add_parser("categories", help="List categories")

    favorites_parser = subparsers.add_parser(
        "favorites", help="Toggle favorites for this session and list them"
    )
    favorites_parser.add_argument("names", nargs="*", help="Spot names to toggle, in order")

    language_parser = subparsers.add_parser("language", help="Show or set the display language")
    language_parser.add_argument("code", nargs="?", help="Language code: zh-Hant, en or ja")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
        logging.basicConfig(
            level=config.logging_level,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            stream=sys.stderr,
        )
        ctx = build_context(config)
        return COMMANDS[args.command](args, ctx)
    except (ValueError, FileNotFoundError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
