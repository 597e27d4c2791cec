"""Spot catalog adapters."""

from tourist_spots.adapters.catalog.sample_spots import SAMPLE_SPOTS
from tourist_spots.adapters.catalog.static_spot_catalog import StaticSpotCatalog
from tourist_spots.adapters.catalog.toml_spot_catalog_loader import TomlSpotCatalogLoader

__all__ = ["SAMPLE_SPOTS", "StaticSpotCatalog", "TomlSpotCatalogLoader"]
