"""Lock-guarded timer handle for hosts that touch a timer from several threads."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import timedelta

from hourglass.core.duration import DurationLike
from hourglass.core.timer import CountdownTimer, TimerState


@dataclass(frozen=True)
class TimerSnapshot:
    """Point-in-time view of a timer, read under one lock acquisition."""

    state: TimerState
    remaining: timedelta
    preset: timedelta
    display: str


class SharedTimer:
    """Serializes every operation on a wrapped :class:`CountdownTimer`.

    The core has no locking of its own.  A UI thread issuing controls while
    a background thread ticks needs exactly one of these around the timer.
    """

    def __init__(self, timer: CountdownTimer | None = None) -> None:
        self._timer = timer if timer is not None else CountdownTimer()
        self._lock = threading.Lock()

    def start(self) -> None:
        with self._lock:
            self._timer.start()

    def pause(self) -> None:
        with self._lock:
            self._timer.pause()

    def reset(self) -> None:
        with self._lock:
            self._timer.reset()

    def set_preset_time(self, preset: DurationLike) -> None:
        with self._lock:
            self._timer.set_preset_time(preset)

    def advance(self) -> None:
        with self._lock:
            self._timer.advance()

    def get_state(self) -> TimerState:
        with self._lock:
            return self._timer.get_state()

    def get_remaining(self) -> timedelta:
        with self._lock:
            return self._timer.get_remaining()

    def get_preset(self) -> timedelta:
        with self._lock:
            return self._timer.get_preset()

    def is_running(self) -> bool:
        with self._lock:
            return self._timer.is_running()

    def to_display_string(self) -> str:
        with self._lock:
            return self._timer.to_display_string()

    def __str__(self) -> str:
        return self.to_display_string()

    def snapshot(self) -> TimerSnapshot:
        """Read state, remaining time and display text in one consistent view."""
        with self._lock:
            return TimerSnapshot(
                state=self._timer.get_state(),
                remaining=self._timer.get_remaining(),
                preset=self._timer.get_preset(),
                display=self._timer.to_display_string(),
            )
