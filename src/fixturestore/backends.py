"""Key-value persistence surfaces for the fixture store.

A backend is a flat, string-keyed store of string values. The fixture store
keeps each collection as JSON text under its collection name.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueBackend(Protocol):
    """Protocol that all persistence backends must implement."""

    def get(self, key: str) -> str | None:
        """Return the stored text for key, or None when absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store text under key, replacing any previous value."""
        ...

    def clear(self) -> None:
        """Drop every key."""
        ...


class MemoryBackend:
    """Process-lifetime backend held in a plain dict."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> list[str]:
        return list(self._data)


class JsonFileBackend:
    """Backend that keeps every key in a single JSON object on disk.

    The file is re-read on each access, so edits made by another process (or
    by hand) between calls are picked up.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._ensure_file_exists()

    def _ensure_file_exists(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write_data({})

    def _read_data(self) -> dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Unreadable store file %s, treating as empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Store file %s does not hold a JSON object", self.path)
            return {}
        return data

    def _write_data(self, data: dict[str, str]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def get(self, key: str) -> str | None:
        return self._read_data().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_data()
        data[key] = value
        self._write_data(data)

    def clear(self) -> None:
        self._write_data({})

    def keys(self) -> list[str]:
        return list(self._read_data())
