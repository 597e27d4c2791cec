"""JSON file settings store implementation."""

import json
import logging
from pathlib import Path

from tourist_spots.domain.ports import SettingsStore

logger = logging.getLogger(__name__)


class JsonFileSettingsStore(SettingsStore):
    """Key-value settings persisted as a single JSON object in a file.

    A missing file reads as empty settings. The file is rewritten on every set.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize with the settings file path."""
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        """Read the whole settings object from disk."""
        if not self._path.exists():
            return {}

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in settings file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Settings file {self._path} must contain a JSON object")
        for key, value in data.items():
            if not isinstance(value, str):
                raise ValueError(
                    f"Setting '{key}' in {self._path} must be a string, got {value!r}"
                )
        return data

    def get(self, key: str) -> str | None:
        """Get the stored value for a key, or None if it was never set."""
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        """Store a value for a key and write the file."""
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug(f"Saved setting '{key}' to {self._path}")
