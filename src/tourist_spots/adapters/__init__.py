"""Adapters layer - catalog data, settings storage, localization and configuration."""

from tourist_spots.adapters.catalog import StaticSpotCatalog, TomlSpotCatalogLoader
from tourist_spots.adapters.config import AppConfig
from tourist_spots.adapters.localization import Localizer
from tourist_spots.adapters.settings import InMemorySettingsStore, JsonFileSettingsStore

__all__ = [
    "AppConfig",
    "InMemorySettingsStore",
    "JsonFileSettingsStore",
    "Localizer",
    "StaticSpotCatalog",
    "TomlSpotCatalogLoader",
]
