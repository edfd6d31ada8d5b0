"""Millisecond wall-clock helpers."""

import time

_POLL_SECONDS = 0.0002


def get_time_ms() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def wait_ms(ms: int) -> None:
    """Block until ``ms`` milliseconds have passed; non-positive values return at once."""
    deadline = get_time_ms() + ms
    while get_time_ms() < deadline:
        time.sleep(_POLL_SECONDS)