"""Shared fixtures."""

from pathlib import Path

import pytest

from tourist_spots.adapters.catalog import StaticSpotCatalog
from tourist_spots.domain.models import TouristSpot


@pytest.fixture
def catalog() -> StaticSpotCatalog:
    """Catalog of the embedded sample spots."""
    return StaticSpotCatalog()


@pytest.fixture
def spots(catalog: StaticSpotCatalog) -> list[TouristSpot]:
    return catalog.all()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test from an empty directory without app environment variables."""
    for name in ("DEFAULT_LANGUAGE", "SETTINGS_FILE", "CATALOG_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
