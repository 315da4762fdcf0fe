"""JSON file store - whole-collection load/save for flat JSON array files."""

import json
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union
from src.utils.errors import PersistenceError
from src.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)

PathLike = Union[str, Path]


class LoadStatus(str, Enum):
    """Outcome of reading a collection file."""
    MISSING = "MISSING"
    EMPTY = "EMPTY"
    LOADED = "LOADED"
    FAILED = "FAILED"


@dataclass
class LoadResult:
    """Internal read result; only FAILED carries an error."""
    status: LoadStatus
    value: Any = None
    error: Optional[Exception] = None


class JsonStore:
    """
    Reads and writes whole collections as JSON files.

    Failures never reach the caller: reads degrade to the fallback value and
    writes are logged and dropped. Each mutating caller should wrap its
    load/append/save cycle in ``locked(path)``.
    """

    def __init__(self):
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def read(self, path: PathLike) -> LoadResult:
        """Read and parse a file, reporting what happened."""
        path = Path(path)
        if not path.exists():
            return LoadResult(LoadStatus.MISSING)

        try:
            raw = path.read_text(encoding="utf-8")
            value = json.loads(raw or "null")
        except (OSError, ValueError) as e:
            return LoadResult(LoadStatus.FAILED, error=PersistenceError(f"Failed to read {path}: {e}"))

        if not value:
            return LoadResult(LoadStatus.EMPTY, value=value)
        return LoadResult(LoadStatus.LOADED, value=value)

    def load(self, path: PathLike, fallback: Any) -> Any:
        """
        Load a collection, returning ``fallback`` when the file is missing,
        unreadable, unparseable, or parses to a falsy value.
        """
        result = self.read(path)
        if result.status == LoadStatus.FAILED:
            logger.error(
                "Error reading data file",
                file_path=str(path),
                error=str(result.error)
            )
            return fallback
        if result.status == LoadStatus.LOADED:
            return result.value
        return fallback

    def save(self, path: PathLike, collection: Any) -> bool:
        """
        Overwrite a file with the pretty-printed collection.

        Returns False when the write failed; the failure is logged only.
        """
        path = Path(path)
        try:
            payload = json.dumps(collection, indent=2)
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(payload, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.error(
                "Error writing data file",
                file_path=str(path),
                error=str(PersistenceError(f"Failed to write {path}: {e}"))
            )
            return False

        logger.debug("Data file written", file_path=str(path), record_count=len(collection) if isinstance(collection, list) else None)
        return True

    def _lock_for(self, path: PathLike) -> threading.RLock:
        key = str(Path(path).resolve())
        with self._locks_guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = threading.RLock()
                self._locks[key] = lock
            return lock

    @contextmanager
    def locked(self, path: PathLike):
        """Hold the per-file lock for a read-modify-write cycle."""
        lock = self._lock_for(path)
        with lock:
            yield


# Global store instance
_json_store: Optional[JsonStore] = None


def get_json_store() -> JsonStore:
    """Get or create global JSON store instance."""
    global _json_store
    if _json_store is None:
        _json_store = JsonStore()
    return _json_store
