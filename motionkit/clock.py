"""A process CPU-time clock with microsecond ticks."""

from __future__ import annotations

import time
from datetime import timedelta

_TICKS_PER_SECOND = 1_000_000

IS_STEADY = True


def now() -> timedelta:
    """Return the processor time consumed so far, as a duration since process start."""
    return timedelta(microseconds=time.process_time_ns() // 1000)


def to_seconds(duration: timedelta) -> float:
    """Return a duration as floating-point seconds."""
    if not isinstance(duration, timedelta):
        raise TypeError(f"expected a timedelta, got {type(duration).__name__}")
    return duration.total_seconds()


def to_duration(seconds: float) -> timedelta:
    """Convert seconds to a clock duration, truncating toward zero to whole ticks."""
    ticks = int(seconds * _TICKS_PER_SECOND)
    return timedelta(microseconds=ticks)