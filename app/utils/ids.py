"""Record id generation.

Ids look like ``lead_1718035200123``: the entity name and a millisecond
timestamp. Within one process the timestamp part never repeats, so records
created in the same millisecond still get distinct ids.
"""

import threading
import time

_lock = threading.Lock()
_last_ms = 0


def _next_timestamp_ms() -> int:
    global _last_ms
    with _lock:
        now = int(time.time() * 1000)
        if now <= _last_ms:
            now = _last_ms + 1
        _last_ms = now
        return now


def new_record_id(entity: str) -> str:
    """Return a fresh ``<entity>_<timestamp>`` id."""
    return f"{entity}_{_next_timestamp_ms()}"
