"""Time sources -- where the timer core reads its instants from.

The core never touches the system clock directly.  Native hosts use
:class:`MonotonicTimeSource`; hosts that own a virtual clock (frame-stepped
simulations, sandboxed runtimes, tests) use :class:`ManualTimeSource`.
"""

from __future__ import annotations

import time
from datetime import timedelta
from typing import Protocol

from hourglass.core.duration import ZERO


class TimeSource(Protocol):
    """Supplies monotonic instants and the distance between them."""

    def now(self) -> float:
        """Return a monotonically non-decreasing instant in seconds."""

    def duration_since(self, earlier: float, later: float) -> timedelta:
        """Return ``later - earlier`` as a non-negative duration."""


class _BaseTimeSource:
    def duration_since(self, earlier: float, later: float) -> timedelta:
        if later <= earlier:
            return ZERO
        return timedelta(seconds=later - earlier)


class MonotonicTimeSource(_BaseTimeSource):
    """Time source backed by ``time.monotonic()``.

    Immune to system clock changes.  Holds no state, so one instance can be
    shared by any number of timers.
    """

    def now(self) -> float:
        return time.monotonic()


class ManualTimeSource(_BaseTimeSource):
    """A clock that only moves when the host moves it."""

    def __init__(self, start: float = 0.0) -> None:
        self._now: float = float(start)

    def now(self) -> float:
        return self._now

    def forward(self, seconds: float) -> float:
        """Move the clock ahead by *seconds* and return the new instant."""
        if seconds < 0:
            raise ValueError(f"cannot move the clock backwards by {seconds} seconds")
        self._now += seconds
        return self._now

    def set(self, instant: float) -> None:
        """Jump to the absolute *instant*; it must not lie in the past."""
        if instant < self._now:
            raise ValueError(f"cannot move the clock back from {self._now} to {instant}")
        self._now = float(instant)
