"""TOML spot catalog loader."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from tourist_spots.adapters.catalog.static_spot_catalog import StaticSpotCatalog
from tourist_spots.adapters.config.app_config import AppConfig
from tourist_spots.domain.models import Category, TouristSpot

logger = logging.getLogger(__name__)


class TomlSpotCatalogLoader:
    """Loads a spot catalog from [[spots]] tables in a TOML file."""

    @staticmethod
    def _coordinate(spot_data: dict[str, Any], key: str, name: str) -> float:
        """Read a required numeric coordinate, rejecting booleans and missing keys."""
        value = spot_data.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(
                f"Spot '{name}' has invalid coordinates: {key} must be a number, got {value!r}"
            )
        return float(value)

    @staticmethod
    def load_spot_from_data(spot_data: dict[str, Any]) -> TouristSpot | None:
        """Load a single spot from a data dict.

        Returns None for entries without a name. Raises ValueError for an unknown
        category or invalid coordinates.
        """
        if not isinstance(spot_data, dict):
            return None

        name = spot_data.get("name")
        if not name or not isinstance(name, str):
            return None

        category_name = spot_data.get("category")
        if not isinstance(category_name, str):
            raise ValueError(f"Spot '{name}' must have a category")
        category = Category.parse(category_name)

        latitude = TomlSpotCatalogLoader._coordinate(spot_data, "latitude", name)
        longitude = TomlSpotCatalogLoader._coordinate(spot_data, "longitude", name)

        return TouristSpot(
            name=name,
            description=str(spot_data.get("description", "")),
            image_name=str(spot_data.get("image_name", "")),
            latitude=latitude,
            longitude=longitude,
            category=category,
        )

    @staticmethod
    def load_file(path: str | Path) -> list[TouristSpot]:
        """Load all spots from a TOML file, keeping file order."""
        catalog_path = Path(path)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

        with open(catalog_path, "rb") as f:
            try:
                toml_data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in catalog file {catalog_path}: {e}") from e

        spots_data = toml_data.get("spots", [])
        if not isinstance(spots_data, list):
            raise ValueError("TOML catalog 'spots' must be a list")

        spots: list[TouristSpot] = []
        for spot_data in spots_data:
            spot = TomlSpotCatalogLoader.load_spot_from_data(spot_data)
            if spot is None:
                logger.warning(f"Skipping catalog entry without a name: {spot_data}")
                continue
            spots.append(spot)
        return spots

    @staticmethod
    def load(config: AppConfig) -> StaticSpotCatalog:
        """Build the catalog named by the config, or the embedded samples if none is set."""
        if not config.catalog_file:
            return StaticSpotCatalog()

        spots = TomlSpotCatalogLoader.load_file(config.catalog_file)
        logger.info(f"Loaded {len(spots)} spot(s) from {config.catalog_file}")
        return StaticSpotCatalog(spots)
