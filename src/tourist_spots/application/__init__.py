"""Application layer - use cases built on the domain."""

from tourist_spots.application.favorites import FavoritesStore
from tourist_spots.application.language import LANGUAGE_SETTING_KEY, LanguageService
from tourist_spots.application.services import SpotBrowsingService, filter_spots

__all__ = [
    "LANGUAGE_SETTING_KEY",
    "FavoritesStore",
    "LanguageService",
    "SpotBrowsingService",
    "filter_spots",
]
