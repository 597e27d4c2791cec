"""In-memory settings store implementation."""

from tourist_spots.domain.ports import SettingsStore


class InMemorySettingsStore(SettingsStore):
    """Settings kept in a dict for the lifetime of the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
