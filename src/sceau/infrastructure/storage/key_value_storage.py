"""
Persistent key-value storage backends (localStorage analogue).
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional

from sceau.domain.services.i_session_store import IKeyValueStorage
from sceau.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class MemoryKeyValueStorage(IKeyValueStorage):
    """In-process key-value storage. Lost on exit."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)


class FileKeyValueStorage(IKeyValueStorage):
    """
    Key-value storage persisted as a single JSON file.

    Survives process restarts, like browser localStorage survives page
    reloads. Writes replace the file atomically.
    """

    def __init__(self, path: str | Path):
        """
        Initialize file storage.

        Args:
            path: JSON file path (parent directory created on first write)
        """
        self.path = Path(path)

    def get_item(self, key: str) -> Optional[str]:
        """Return stored value or None."""
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Store value under key."""
        data = self._load()
        data[key] = value
        self._save(data)

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        data = self._load()
        if key in data:
            del data[key]
            self._save(data)

    def _load(self) -> dict:
        """Read the storage file; missing or corrupt files read as empty."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Unreadable storage file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict) -> None:
        """Write the storage file atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=".", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise
