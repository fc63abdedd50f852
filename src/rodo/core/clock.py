# src/rodo/core/clock.py

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], int]


def current_time_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000
