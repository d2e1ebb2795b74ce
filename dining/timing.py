"""Millisecond clock and interruptible sleeping."""

from __future__ import annotations

import time
from typing import Callable


def now_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(duration: int, stop: Callable[[], bool]) -> None:
    """Sleep ``duration`` ms, returning early once ``stop()`` is true."""
    wake_up = now_ms() + duration
    while now_ms() < wake_up:
        if stop():
            break
        time.sleep(0.0001)


def wait_until(start_time: int) -> None:
    """Block until the clock reaches ``start_time`` (in ms)."""
    while now_ms() < start_time:
        time.sleep(0.0001)