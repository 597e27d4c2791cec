"""In-memory favorites store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from tourist_spots.domain.contracts.favorites_store import (
    FavoritesListener,
    FavoritesStoreProtocol,
)

if TYPE_CHECKING:
    from tourist_spots.domain.models.tourist_spot import TouristSpot

logger = logging.getLogger(__name__)


class FavoritesStore(FavoritesStoreProtocol):
    """Ordered, unique collection of favorite spots for one session.

    Membership is by equality and the insertion order is the display order of
    the favorites screen. Nothing is persisted.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._favorites: list[TouristSpot] = []
        self._listeners: list[FavoritesListener] = []

    def toggle(self, spot: TouristSpot) -> None:
        """Add the spot if it is not a favorite, otherwise remove it."""
        if spot in self._favorites:
            self._favorites.remove(spot)
            logger.debug(f"Removed favorite: {spot.name}")
        else:
            self._favorites.append(spot)
            logger.debug(f"Added favorite: {spot.name}")
        self._notify()

    def is_favorite(self, spot: TouristSpot) -> bool:
        """Check whether an equal spot is in the store."""
        return spot in self._favorites

    def list(self) -> list[TouristSpot]:
        """Get the favorites in insertion order."""
        return list(self._favorites)

    def subscribe(self, listener: FavoritesListener) -> Callable[[], None]:
        """Register a listener called with the favorites after each toggle.

        Returns:
            A function that unregisters the listener. Calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._favorites)

    def __contains__(self, spot: object) -> bool:
        return spot in self._favorites

    def _notify(self) -> None:
        """Send the current favorites to every listener."""
        snapshot = self.list()
        for listener in list(self._listeners):
            try:
                listener(list(snapshot))
            except Exception as e:
                logger.warning(f"Favorites listener failed: {e}", exc_info=True)
