"""Tick loop -- the repeating callback that drives a timer forward."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional, Protocol

from hourglass.core.timer import TimerState

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.016  # seconds, roughly one rendering frame


class Tickable(Protocol):
    """Anything a TickLoop can drive: a CountdownTimer or a SharedTimer."""

    def advance(self) -> None: ...

    def get_state(self) -> TimerState: ...


class TickLoop:
    """Call ``advance()`` on a fixed cadence until the timer stops working.

    *sleep* defaults to ``time.sleep``; a host with its own scheduler can
    pass something else.  The loop does not start or stop the timer itself.
    """

    def __init__(
        self,
        timer: Tickable,
        interval: float = DEFAULT_TICK_INTERVAL,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._timer = timer
        self._interval = interval
        self._sleep: Callable[[float], None] = sleep if sleep is not None else time.sleep

    @property
    def interval(self) -> float:
        return self._interval

    def step(self) -> TimerState:
        """Run a single tick and return the resulting state."""
        self._timer.advance()
        return self._timer.get_state()

    def run(
        self,
        on_frame: Optional[Callable[[Tickable], None]] = None,
        max_frames: Optional[int] = None,
    ) -> TimerState:
        """Tick until the timer leaves WORKING, or for *max_frames* frames.

        *on_frame* is called with the timer after every tick so the host can
        redraw.  Returns the state the timer was left in.
        """
        logger.debug("tick loop started, interval=%ss", self._interval)
        frames = 0
        while self._timer.get_state() == TimerState.WORKING:
            if max_frames is not None and frames >= max_frames:
                break
            self._sleep(self._interval)
            self.step()
            frames += 1
            if on_frame is not None:
                on_frame(self._timer)

        state = self._timer.get_state()
        logger.debug("tick loop stopped after %d frames in %s state", frames, state.value)
        return state
