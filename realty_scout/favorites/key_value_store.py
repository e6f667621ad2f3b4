"""
Key-value storage backends for persisted user state.

A backend stores string values under string keys. The file backend keeps all
keys in a single JSON document; the memory backend is used in tests and when
persistence is disabled.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from realty_scout.error_handling import StorageError


logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Minimal persistent key-value interface."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent.

        Raises:
            StorageError: If the backend cannot be read
        """

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key.

        Raises:
            StorageError: If the backend cannot be written
        """


class InMemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store; contents live as long as the instance."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class FileKeyValueStore(KeyValueStore):
    """Stores all keys in one JSON object on disk.

    Attributes:
        path: Location of the JSON document
    """

    def __init__(self, path: str):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StorageError(f"Failed to parse store file {self.path}: {e}") from e
        except OSError as e:
            raise StorageError(f"Failed to read store file {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Store file {self.path} does not contain a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is not None and not isinstance(value, str):
            raise StorageError(f"Value under {key!r} in {self.path} is not a string")
        return value

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError as e:
            logger.warning(f"Overwriting unreadable store file: {e}")
            data = {}
        data[key] = value

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise StorageError(f"Failed to write store file {self.path}: {e}") from e
        logger.debug(f"Wrote key {key!r} to {self.path}")


def create_store(storage_type: str, path: str) -> KeyValueStore:
    """Build a key-value backend from configuration.

    Args:
        storage_type: "file" or "memory"
        path: File location for the file backend

    Returns:
        KeyValueStore instance; unknown types fall back to memory
    """
    if storage_type == "file":
        return FileKeyValueStore(path)
    if storage_type != "memory":
        logger.warning(f"Unsupported storage type: {storage_type}, using in-memory storage")
    return InMemoryKeyValueStore()
