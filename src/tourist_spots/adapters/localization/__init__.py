"""Localization adapters."""

from tourist_spots.adapters.localization.localizer import Localizer
from tourist_spots.adapters.localization.strings import STRING_TABLES

__all__ = ["STRING_TABLES", "Localizer"]
