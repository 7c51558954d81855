"""Reduce a task's lifecycle event times to one representative timestamp."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from datetime import datetime, timedelta

EPOCH = datetime(1970, 1, 1)

Timestamp = float | int | datetime


def to_datetime(seconds: float) -> datetime:
    """Convert epoch seconds with millisecond precision to a naive UTC datetime."""
    whole = int(seconds)
    millis = round(1000 * (seconds - whole))
    return EPOCH + timedelta(seconds=whole, milliseconds=millis)


def _epoch_seconds(value: Timestamp) -> float:
    if isinstance(value, datetime):
        return value.timestamp()
    return float(value)


def now_seconds() -> float:
    return float(int(time.time()))


def newest_time(
    times: Iterable[Timestamp | None],
    now: Callable[[], float] = now_seconds,
) -> datetime:
    present = [_epoch_seconds(t) for t in times if t is not None]
    if not present:
        return to_datetime(now())
    return to_datetime(max(present))
