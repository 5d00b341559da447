"""Tests for the monotonic and manual time sources."""

from datetime import timedelta
from unittest.mock import patch

import pytest

from hourglass.core.duration import ZERO
from hourglass.core.time_source import ManualTimeSource, MonotonicTimeSource


class TestMonotonicTimeSource:
    """MonotonicTimeSource reads time.monotonic() on every call."""

    def test_now_uses_monotonic(self) -> None:
        source = MonotonicTimeSource()
        with patch("hourglass.core.time_source.time") as mock_time:
            mock_time.monotonic.return_value = 42.5
            assert source.now() == 42.5

    def test_now_is_non_decreasing(self) -> None:
        source = MonotonicTimeSource()
        first = source.now()
        assert source.now() >= first

    def test_duration_since(self) -> None:
        source = MonotonicTimeSource()
        assert source.duration_since(10.0, 12.5) == timedelta(seconds=2.5)

    def test_duration_since_clamps_backwards_span(self) -> None:
        source = MonotonicTimeSource()
        assert source.duration_since(12.0, 10.0) == ZERO


class TestManualTimeSource:
    """ManualTimeSource only moves when told to."""

    def test_starts_at_given_instant(self) -> None:
        assert ManualTimeSource().now() == 0.0
        assert ManualTimeSource(start=5.0).now() == 5.0

    def test_forward_moves_clock(self) -> None:
        source = ManualTimeSource()
        assert source.forward(1.5) == 1.5
        assert source.now() == 1.5

    def test_forward_zero_is_allowed(self) -> None:
        source = ManualTimeSource(start=3.0)
        source.forward(0)
        assert source.now() == 3.0

    def test_forward_negative_raises(self) -> None:
        source = ManualTimeSource()
        with pytest.raises(ValueError):
            source.forward(-1)

    def test_set_jumps_ahead(self) -> None:
        source = ManualTimeSource()
        source.set(100.0)
        assert source.now() == 100.0

    def test_set_backwards_raises(self) -> None:
        source = ManualTimeSource(start=10.0)
        with pytest.raises(ValueError):
            source.set(9.0)

    def test_duration_since_does_not_move_clock(self) -> None:
        source = ManualTimeSource()
        source.forward(4)
        assert source.duration_since(1.0, source.now()) == timedelta(seconds=3)
        assert source.now() == 4.0
