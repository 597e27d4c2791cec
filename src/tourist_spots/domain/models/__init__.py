"""Domain models for tourist spots."""

from tourist_spots.domain.models.category import Category
from tourist_spots.domain.models.language import Language
from tourist_spots.domain.models.tourist_spot import TouristSpot

__all__ = [
    "Category",
    "Language",
    "TouristSpot",
]
