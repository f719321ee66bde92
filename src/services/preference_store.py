"""Preference store - Durable key/value storage for user preferences"""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol

from models.errors import PersistenceError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.THEME)


class PreferenceStore(Protocol):
    """Single-user key/value store (the browser's localStorage equivalent)"""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryPreferenceStore:
    """Volatile store, lost when the process exits"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonPreferenceStore:
    """
    Durable store backed by a flat JSON object on disk.

    Writes are immediate and last-writer-wins. Any I/O or decode problem
    is raised as PersistenceError; callers decide whether it matters.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:  # ValueError covers JSONDecodeError and UnicodeDecodeError
            raise PersistenceError(f"Cannot read preferences from {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise PersistenceError(f"Preferences file {self.path} is not a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read()
        except PersistenceError as e:
            log.warn(f"Overwriting unreadable preferences file: {e}")
            data = {}

        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            raise PersistenceError(f"Cannot write preferences to {self.path}: {e}") from e

        log.debug(f"Preferences saved {self.path}")
