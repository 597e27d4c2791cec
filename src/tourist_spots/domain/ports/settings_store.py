"""Settings store port."""

from typing import Protocol


class SettingsStore(Protocol):
    """Port for a trivial key-value store of user settings."""

    def get(self, key: str) -> str | None:
        """Get the stored value for a key, or None if it was never set."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value for a key, replacing any previous value."""
        ...
