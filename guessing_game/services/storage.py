"""
Storage Service

Key-value persistence collaborators for the account store and game session.
Values are strings; callers encode their collections as JSON.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import MalformedPersistedDataError


class KeyValueStorage:
    """
    Minimal key-value surface shared by every storage backend.

    Writes are synchronous and fail fast; there is no locking or versioning,
    the last writer wins.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def read_json(self, key: str) -> Any:
        """
        Decode the JSON value stored under ``key``.

        Returns:
            Decoded value, or None if the key is absent

        Raises:
            MalformedPersistedDataError: If the stored value is not valid JSON
        """
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as e:
            raise MalformedPersistedDataError(key, str(e)) from e

    def write_json(self, key: str, value: Any) -> None:
        self.set(key, json.dumps(value, ensure_ascii=False))


class MemoryStorage(KeyValueStorage):
    """In-memory storage, lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return list(self._data)


class JsonFileStorage(KeyValueStorage):
    """
    File-backed storage keeping every key in one JSON object on disk.

    The whole file is re-read on each access and rewritten on each write, so
    two instances over the same path always see each other's last write.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            # An unreadable file behaves like an empty store
            return {}
        if not isinstance(data, dict):
            return {}
        return {key: value for key, value in data.items() if isinstance(value, str)}

    def _save(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)


def create_storage(storage_path: Optional[str]) -> KeyValueStorage:
    """Pick a backend: a JSON file when a path is configured, memory otherwise."""
    if storage_path:
        return JsonFileStorage(storage_path)
    return MemoryStorage()
