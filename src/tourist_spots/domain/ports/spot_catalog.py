"""Spot catalog port."""

from typing import Protocol
from uuid import UUID

from tourist_spots.domain.models.tourist_spot import TouristSpot


class SpotCatalog(Protocol):
    """Port for reading the fixed collection of tourist spots."""

    def all(self) -> list[TouristSpot]:
        """Return every spot in catalog order."""
        ...

    def find_by_id(self, spot_id: UUID) -> TouristSpot | None:
        """Find a spot by its identifier."""
        ...
