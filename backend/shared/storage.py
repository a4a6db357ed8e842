"""
Client-side key-value storage.

Provides the persistence port used by the session module, plus two
implementations:
- MemoryStorage: dict-backed, for tests and throwaway sessions
- JsonFileStorage: a single JSON document on disk that survives restarts
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from .config import get_settings
from .exceptions import StorageError

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStorage(Protocol):
    """
    Interface for string key-value storage scoped to the client device.

    Reads and writes are synchronous and local.
    """

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        ...


class MemoryStorage:
    """Storage held in a plain dict for the lifetime of the object."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._items)


class JsonFileStorage:
    """
    Storage persisted as one JSON object in a file.

    The whole document is rewritten on every mutation through a temporary
    file in the same directory followed by os.replace, so readers never see
    a half-written file. A missing file reads as empty.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._dump(data)

    def remove_item(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._dump(data)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}

        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to read storage file: {e}", path=str(self._path))

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(
                f"Storage file is not valid JSON: {e}",
                path=str(self._path),
                code="STORAGE_CORRUPT",
            )

        if not isinstance(data, dict):
            raise StorageError(
                "Storage file must contain a JSON object",
                path=str(self._path),
                code="STORAGE_CORRUPT",
            )

        # Non-string values were not written by this class; skip them
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _dump(self, data: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=".storage-", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, sort_keys=True)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write storage file: {e}", path=str(self._path))

        logger.debug(f"Wrote {len(data)} entries to {self._path}")


# Module-level storage cache
_storage: Optional[JsonFileStorage] = None


def get_storage() -> JsonFileStorage:
    """
    Get the file-backed storage at the configured path.

    Returns:
        JsonFileStorage rooted at settings.storage_path
    """
    global _storage

    if _storage is None:
        settings = get_settings()
        _storage = JsonFileStorage(settings.storage_path)

    return _storage


def reset_storage() -> None:
    """
    Reset the cached storage instance.

    Useful for testing or when configuration changes.
    """
    global _storage
    _storage = None
