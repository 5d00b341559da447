"""hourglass: a tick-driven countdown timer engine."""

from hourglass.core.duration import MAX_DURATION, ZERO, as_duration, format_hms, from_hms
from hourglass.core.time_source import ManualTimeSource, MonotonicTimeSource, TimeSource
from hourglass.core.timer import CountdownTimer, TimerState

__version__ = "0.1.0"

__all__ = [
    "CountdownTimer",
    "TimerState",
    "TimeSource",
    "MonotonicTimeSource",
    "ManualTimeSource",
    "ZERO",
    "MAX_DURATION",
    "as_duration",
    "format_hms",
    "from_hms",
]
