"""
String-keyed durable storage.

A tiny key/value store with the same contract as a browser's local storage:
keys and values are strings, get_item() returns None for a missing key, and
set_item() overwrites. Two implementations:

- JsonFileStorage: all keys in one JSON object on disk
- MemoryStorage: a dict, for tests and throwaway sessions
"""

import json
import logging
from pathlib import Path
from typing import Optional

from ..config import STORAGE_FILE

logger = logging.getLogger(__name__)


class MemoryStorage:
    """In-memory storage; nothing survives the process."""

    def __init__(self, initial: Optional[dict] = None):
        self._items = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list:
        return sorted(self._items)


class JsonFileStorage:
    """
    Storage backed by a single JSON file.

    The file holds one object mapping keys to string values:

        {"mystudies-data-v1": "[{\\"id\\": \\"3fa9c2e1\\", ...}]"}

    A missing file reads as empty. An unreadable or corrupted file also reads
    as empty (logged) and is overwritten by the next set_item().

    Usage:
        storage = JsonFileStorage()               # ~/.mystudies/storage.json
        storage = JsonFileStorage("/tmp/s.json")  # custom location
    """

    def __init__(self, path=None):
        self.path = Path(path) if path is not None else STORAGE_FILE

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Storage file unreadable, treating as empty: %s", e,
                           extra={"path": self.path})
            return {}
        if not isinstance(data, dict):
            logger.warning("Storage file is not a JSON object, treating as empty",
                           extra={"path": self.path})
            return {}
        return data

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def get_item(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = str(value)
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)

    def keys(self) -> list:
        return sorted(self._read())
