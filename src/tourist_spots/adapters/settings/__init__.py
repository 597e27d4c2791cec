"""Settings store adapters."""

from tourist_spots.adapters.settings.in_memory_settings_store import InMemorySettingsStore
from tourist_spots.adapters.settings.json_settings_store import JsonFileSettingsStore

__all__ = ["InMemorySettingsStore", "JsonFileSettingsStore"]
