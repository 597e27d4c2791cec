"""Ports (interfaces) for the ports-and-adapters architecture."""

from tourist_spots.domain.ports.settings_store import SettingsStore
from tourist_spots.domain.ports.spot_catalog import SpotCatalog

__all__ = [
    "SettingsStore",
    "SpotCatalog",
]
