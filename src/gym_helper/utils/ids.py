"""Timestamp-based identifiers."""

import time

_last_issued = 0


def next_timestamp_id() -> int:
    """Return the current time in milliseconds, bumped past the last issued value.

    Two calls inside the same millisecond still get distinct, increasing ids.
    """
    global _last_issued
    candidate = int(time.time() * 1000)
    if candidate <= _last_issued:
        candidate = _last_issued + 1
    _last_issued = candidate
    return candidate
