"""Mini README: Local key-value storage backing user preferences.

Structure:
    * KeyValueStore - abstract string-to-string store.
    * MemoryStore - dict-backed store for tests and throwaway sessions.
    * JsonFileStore - single JSON object persisted on disk.

Storage is best effort. ``JsonFileStore`` rewrites the whole file through a
``.tmp`` sibling and ``os.replace``; a missing or unreadable file simply
starts empty rather than failing the app.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueStore(ABC):
    """Minimal persisted mapping of string keys to string values."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key`` if present."""


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)


class JsonFileStore(KeyValueStore):
    """Persist all keys as one JSON object in ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._values = self._load()
        LOGGER.debug("Opened key-value store %s with %s keys", self.path, len(self._values))

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as error:
            LOGGER.warning("Ignoring unreadable store %s: %s", self.path, error)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Ignoring store %s: expected a JSON object", self.path)
            return {}
        return {str(key): str(value) for key, value in payload.items()}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        temp_path.write_text(json.dumps(self._values, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(temp_path, self.path)

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value
        self._flush()

    def delete(self, key: str) -> None:
        if self._values.pop(key, None) is not None:
            self._flush()
