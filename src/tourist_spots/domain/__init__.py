"""Domain layer - core business logic and models."""

from tourist_spots.domain.models import Category, Language, TouristSpot
from tourist_spots.domain.ports import SettingsStore, SpotCatalog

__all__ = [
    "Category",
    "Language",
    "SettingsStore",
    "SpotCatalog",
    "TouristSpot",
]
