"""Tourist spot domain model."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4

from tourist_spots.domain.models.category import Category


@dataclass(frozen=True)
class TouristSpot:
    """Represents a single tourist destination.

    The id is generated once at construction, so two spots built from the same
    data are still distinct records.
    """

    name: str
    description: str
    image_name: str  # Image asset name, resolved by the presentation layer
    latitude: float
    longitude: float
    category: Category
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        """Validate coordinates are within WGS84 ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {self.longitude}")
