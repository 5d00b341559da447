"""Timer core -- a tick-driven countdown state machine."""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum

from hourglass.core.duration import ZERO, DurationLike, as_duration, format_hms
from hourglass.core.time_source import MonotonicTimeSource, TimeSource

logger = logging.getLogger(__name__)


class TimerState(Enum):
    """Possible states of the timer."""

    INACTIVE = "inactive"
    WORKING = "working"
    PAUSED = "paused"
    FINISHED = "finished"

    def __str__(self) -> str:
        return self.value.capitalize()


_DEFAULT_TIME_SOURCE = MonotonicTimeSource()


class CountdownTimer:
    """A countdown timer advanced by its host on a repeating tick.

    The timer owns no thread and never reads the clock on its own: the host
    calls :meth:`advance` at whatever cadence it likes and the timer
    subtracts the real time measured since the previous tick, so an
    irregular cadence causes no drift.  Control operations never fail; a
    call that does not apply to the current state is a no-op.
    """

    def __init__(
        self,
        preset: DurationLike = ZERO,
        time_source: TimeSource | None = None,
    ) -> None:
        self._time_source: TimeSource = (
            time_source if time_source is not None else _DEFAULT_TIME_SOURCE
        )
        self._preset: timedelta = as_duration(preset)
        self._remaining: timedelta = self._preset
        self._state: TimerState = TimerState.INACTIVE
        self._last_tick: float | None = None

    # -- public interface ----------------------------------------------------

    def start(self) -> None:
        """Start counting down, or resume from PAUSED.

        No-op while WORKING or FINISHED, and from INACTIVE when the preset
        is zero: a zero preset has nothing to count down, and starting it
        would only finish on the first tick.
        """
        if self._state == TimerState.INACTIVE and self._preset == ZERO:
            return
        if self._state not in (TimerState.INACTIVE, TimerState.PAUSED):
            return
        self._last_tick = self._time_source.now()
        self._set_state(TimerState.WORKING)

    def pause(self) -> None:
        """Freeze the remaining time.  Only meaningful while WORKING."""
        if self._state != TimerState.WORKING:
            return
        # Time spent since the last tick still counts.
        self._consume_elapsed()
        if self._state == TimerState.WORKING:
            self._last_tick = None
            self._set_state(TimerState.PAUSED)

    def reset(self) -> None:
        """Return to INACTIVE with the full preset on the clock."""
        self._remaining = self._preset
        self._last_tick = None
        self._set_state(TimerState.INACTIVE)

    def set_preset_time(self, preset: DurationLike) -> None:
        """Configure the duration restored by :meth:`reset`.

        While INACTIVE the remaining time follows the new preset at once;
        otherwise the running countdown is left alone.
        """
        self._preset = as_duration(preset)
        logger.debug("preset set to %s", format_hms(self._preset))
        if self._state == TimerState.INACTIVE:
            self._remaining = self._preset

    def advance(self) -> None:
        """Subtract the time elapsed since the last tick.

        Reaching zero transitions to FINISHED.  Ignored unless WORKING.
        """
        if self._state != TimerState.WORKING:
            return
        self._consume_elapsed()

    def get_state(self) -> TimerState:
        """Return the current timer state."""
        return self._state

    def get_remaining(self) -> timedelta:
        """Return the time left as of the last tick."""
        return self._remaining

    def get_preset(self) -> timedelta:
        """Return the configured preset."""
        return self._preset

    def is_running(self) -> bool:
        return self._state == TimerState.WORKING

    def to_display_string(self) -> str:
        """Return the remaining time as ``HH:MM:SS``."""
        return format_hms(self._remaining)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return (
            f"CountdownTimer(state={self._state.value}, "
            f"remaining={format_hms(self._remaining)}, preset={format_hms(self._preset)})"
        )

    # -- private helpers -----------------------------------------------------

    def _consume_elapsed(self) -> None:
        """Fold the time since ``_last_tick`` into ``_remaining``."""
        now = self._time_source.now()
        elapsed = self._time_source.duration_since(self._last_tick, now)
        self._remaining = max(ZERO, self._remaining - elapsed)
        self._last_tick = now
        if self._remaining == ZERO:
            self._last_tick = None
            self._set_state(TimerState.FINISHED)

    def _set_state(self, new_state: TimerState) -> None:
        if new_state != self._state:
            logger.debug("timer %s -> %s", self._state.value, new_state.value)
        self._state = new_state
