"""Integer identifiers for new orders and products."""
from __future__ import annotations

import threading
import time
from typing import Callable


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class IdentityAssigner:
    """
    Issue ids from the wall clock (milliseconds since the Unix epoch).

    Two creations inside the same millisecond would collide on the raw clock,
    so every id is at least ``last + 1``. Ids stay integers and are strictly
    increasing for the lifetime of the process.
    """

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or _now_ms
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            candidate = int(self._clock())
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate
