"""Tests for the lock-guarded SharedTimer handle."""

import threading
from datetime import timedelta
from unittest.mock import patch

from hourglass.core.time_source import ManualTimeSource
from hourglass.core.timer import CountdownTimer, TimerState
from hourglass.host.shared import SharedTimer, TimerSnapshot


class TestSharedTimer:
    """SharedTimer forwards every operation to the wrapped timer."""

    def test_default_wraps_inactive_timer(self) -> None:
        shared = SharedTimer()
        assert shared.get_state() == TimerState.INACTIVE
        assert shared.get_remaining() == timedelta(0)

    def test_controls_are_forwarded(self) -> None:
        clock = ManualTimeSource()
        shared = SharedTimer(CountdownTimer(time_source=clock))
        shared.set_preset_time(timedelta(seconds=30))
        shared.start()
        clock.forward(10)
        shared.advance()
        shared.pause()

        assert shared.get_state() == TimerState.PAUSED
        assert shared.get_remaining() == timedelta(seconds=20)

        shared.reset()
        assert shared.get_remaining() == timedelta(seconds=30)

    def test_snapshot(self) -> None:
        shared = SharedTimer(CountdownTimer(timedelta(seconds=3661)))
        assert shared.snapshot() == TimerSnapshot(
            state=TimerState.INACTIVE,
            remaining=timedelta(seconds=3661),
            preset=timedelta(seconds=3661),
            display="01:01:01",
        )

    def test_concurrent_controls_leave_consistent_state(self) -> None:
        clock = ManualTimeSource()
        shared = SharedTimer(CountdownTimer(60, time_source=clock))
        shared.start()

        def hammer() -> None:
            for _ in range(200):
                shared.advance()
                shared.pause()
                shared.start()

        threads = [threading.Thread(target=hammer) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        snapshot = shared.snapshot()
        assert snapshot.state == TimerState.WORKING
        assert snapshot.remaining == timedelta(seconds=60)

    def test_read_accessors(self) -> None:
        clock = ManualTimeSource()
        shared = SharedTimer(CountdownTimer(timedelta(seconds=90), time_source=clock))
        assert shared.get_preset() == timedelta(seconds=90)
        assert not shared.is_running()
        assert str(shared) == "00:01:30"

        shared.start()
        clock.forward(30)
        shared.advance()
        assert shared.is_running()
        assert str(shared) == "00:01:00"

        shared.set_preset_time(timedelta(seconds=10))
        assert shared.get_preset() == timedelta(seconds=10)
        assert shared.get_remaining() == timedelta(seconds=60)

    def test_read_accessors_take_the_lock(self) -> None:
        shared = SharedTimer(CountdownTimer(5))
        calls = [shared.get_preset, shared.is_running, shared.__str__]
        with patch.object(shared, "_lock") as mock_lock:
            for call in calls:
                call()
        assert mock_lock.__enter__.call_count == len(calls)
