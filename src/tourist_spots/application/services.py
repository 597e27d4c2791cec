"""Application services (use cases) for browsing tourist spots."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from tourist_spots.domain.models import Category, TouristSpot

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from tourist_spots.domain.ports import SpotCatalog


def filter_spots(
    spots: Iterable[TouristSpot], query: str = "", category: Category | None = None
) -> list[TouristSpot]:
    """Filter spots by name and category, keeping catalog order.

    Args:
        spots: Spots to filter, in display order.
        query: Case-sensitive substring the spot name must contain. Empty matches all.
        category: Category the spot must belong to. None matches all.

    Returns:
        The matching spots in their original order. Empty if nothing matches.
    """
    return [
        spot
        for spot in spots
        if (not query or query in spot.name) and (category is None or spot.category == category)
    ]


class SpotBrowsingService:
    """Holds the search text and selected category of the spot list."""

    def __init__(self, catalog: "SpotCatalog") -> None:
        """Initialize with a catalog, showing all spots."""
        self._catalog = catalog
        self.query = ""
        self.selected_category: Category | None = None

    def search(self, query: str) -> list[TouristSpot]:
        """Set the search text and return the visible spots."""
        self.query = query
        return self.visible_spots()

    def select_category(self, category: Category | None) -> list[TouristSpot]:
        """Select a category (None for all) and return the visible spots."""
        self.selected_category = category
        return self.visible_spots()

    def visible_spots(self) -> list[TouristSpot]:
        """Get the spots matching the current search text and category."""
        spots = filter_spots(self._catalog.all(), self.query, self.selected_category)
        logger.debug(
            f"Filter query='{self.query}' category={self.selected_category} matched {len(spots)} spot(s)"
        )
        return spots

    def spot_images(self) -> list[str]:
        """Image names of the whole catalog, in order, for the carousel."""
        return [spot.image_name for spot in self._catalog.all()]
