"""Contracts shared between application services and their consumers."""

from tourist_spots.domain.contracts.favorites_store import (
    FavoritesListener,
    FavoritesStoreProtocol,
)

__all__ = ["FavoritesListener", "FavoritesStoreProtocol"]
