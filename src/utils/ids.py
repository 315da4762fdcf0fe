"""Record ID and timestamp generation."""

import threading
import time
from datetime import datetime, timezone

_lock = threading.Lock()
_last_id = 0


def generate_record_id() -> int:
    """
    Generate an integer record ID.

    The ID is the current epoch time in milliseconds, bumped past the last
    issued ID when the clock has not advanced, so IDs are strictly increasing
    within the process.
    """
    global _last_id
    with _lock:
        candidate = int(time.time() * 1000)
        if candidate <= _last_id:
            candidate = _last_id + 1
        _last_id = candidate
        return candidate


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-12-09T12:00:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
