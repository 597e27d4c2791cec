"""Protocol for the favorites store."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tourist_spots.domain.models.tourist_spot import TouristSpot

FavoritesListener = Callable[[list["TouristSpot"]], None]


class FavoritesStoreProtocol(Protocol):
    """Protocol for an ordered, unique collection of favorite spots."""

    def toggle(self, spot: "TouristSpot") -> None:
        """Add the spot if it is not a favorite, otherwise remove it.

        Args:
            spot: The spot to toggle.
        """
        ...

    def is_favorite(self, spot: "TouristSpot") -> bool:
        """Check whether the spot is currently a favorite.

        Args:
            spot: The spot to check.

        Returns:
            True if an equal spot is in the store.
        """
        ...

    def list(self) -> list["TouristSpot"]:
        """Get the favorites in the order they were added.

        Returns:
            A copy of the current favorites.
        """
        ...

    def subscribe(self, listener: FavoritesListener) -> Callable[[], None]:
        """Register a listener called with the favorites after each change.

        Args:
            listener: Callback receiving the current favorites list.

        Returns:
            A function that removes the listener again.
        """
        ...
