"""Clock sources for elapsed-time calculation."""

import time
from typing import Callable

Clock = Callable[[], int]


def monotonic_ms() -> int:
    """Return ``time.monotonic_ns()`` truncated to whole milliseconds."""
    return time.monotonic_ns() // 1_000_000
