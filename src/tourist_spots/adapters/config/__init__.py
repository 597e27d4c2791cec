"""Configuration adapters."""

from tourist_spots.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
