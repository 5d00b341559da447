"""Duration helpers -- coercion, clamping and ``HH:MM:SS`` formatting.

Durations are plain :class:`datetime.timedelta` values that are never
negative.  Anything that would produce a negative span clamps to ``ZERO``;
anything too large for a ``timedelta`` clamps to ``MAX_DURATION``.
"""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from typing import Union

logger = logging.getLogger(__name__)

ZERO = timedelta(0)
MAX_DURATION = timedelta.max
_ONE_SECOND = timedelta(seconds=1)

DurationLike = Union[timedelta, int, float]


def _from_seconds(seconds: Union[int, float]) -> timedelta:
    if isinstance(seconds, float) and math.isnan(seconds):
        logger.debug("clamping NaN duration to zero")
        return ZERO
    try:
        return timedelta(seconds=seconds)
    except OverflowError:
        logger.debug("clamping out-of-range duration %r", seconds)
        return MAX_DURATION if seconds > 0 else ZERO


def as_duration(value: DurationLike) -> timedelta:
    """Return *value* as a non-negative ``timedelta``.

    Numbers are taken as seconds.  Negative values and NaN clamp to
    ``ZERO``; infinite or oversized values clamp to ``MAX_DURATION``.
    """
    if isinstance(value, bool) or not isinstance(value, (timedelta, int, float)):
        raise TypeError(
            f"duration must be a timedelta or a number of seconds, got {type(value).__name__}"
        )
    if not isinstance(value, timedelta):
        value = _from_seconds(value)
    if value < ZERO:
        logger.debug("clamping negative duration %s to zero", value)
        return ZERO
    return value


def from_hms(hours: int = 0, minutes: int = 0, seconds: int = 0) -> timedelta:
    """Build a duration from its clock fields."""
    return as_duration(hours * 3600 + minutes * 60 + seconds)


def format_hms(duration: timedelta) -> str:
    """Format *duration* as ``HH:MM:SS``.

    Partial seconds are truncated.  Hours are padded to two digits and keep
    growing past 99 (``100:00:00``).
    """
    total = max(duration, ZERO) // _ONE_SECOND
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
