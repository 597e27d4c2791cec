"""Static spot catalog implementation."""

from collections.abc import Iterable
from uuid import UUID

from tourist_spots.adapters.catalog.sample_spots import SAMPLE_SPOTS
from tourist_spots.domain.models import TouristSpot
from tourist_spots.domain.ports import SpotCatalog


class StaticSpotCatalog(SpotCatalog):
    """Fixed, ordered collection of spots populated once at startup."""

    def __init__(self, spots: Iterable[TouristSpot] = SAMPLE_SPOTS) -> None:
        """Initialize with the spots to expose, defaulting to the embedded samples."""
        self._spots: tuple[TouristSpot, ...] = tuple(spots)

    def all(self) -> list[TouristSpot]:
        """Return every spot in catalog order."""
        return list(self._spots)

    def find_by_id(self, spot_id: UUID) -> TouristSpot | None:
        """Find a spot by its identifier."""
        for spot in self._spots:
            if spot.id == spot_id:
                return spot
        return None

    def find_by_name(self, name: str) -> TouristSpot | None:
        """Find the first spot whose name equals the given name exactly."""
        for spot in self._spots:
            if spot.name == name:
                return spot
        return None

    def __len__(self) -> int:
        return len(self._spots)
