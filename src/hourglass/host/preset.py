"""Preset input validation.

User-entered hours/minutes/seconds are checked here, before they ever reach
:meth:`CountdownTimer.set_preset_time`.  The core itself accepts any
non-negative duration; the bounds below are a UI convention.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Union

from hourglass.core.duration import from_hms

HOURS_RANGE = (0, 23)
MINUTES_RANGE = (0, 59)
SECONDS_RANGE = (0, 59)

# Leading field of the SS and MM:SS forms.
_SHORT_SECONDS_RANGE = (0, 24 * 3600 - 1)
_SHORT_MINUTES_RANGE = (0, 24 * 60 - 1)

FieldValue = Union[int, str]


class InvalidPresetError(ValueError):
    """Raised when preset input is malformed or out of range."""


def _parse_field(name: str, value: FieldValue, bounds: tuple[int, int]) -> int:
    if isinstance(value, bool):
        raise InvalidPresetError(f"{name} must be a whole number, got {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if not text.isdecimal():
            raise InvalidPresetError(f"{name} must be a whole number, got {value!r}")
        try:
            number = int(text)
        except ValueError as exc:
            raise InvalidPresetError(f"{name} is too long: {len(text)} digits") from exc
    elif isinstance(value, int):
        number = value
    else:
        raise InvalidPresetError(
            f"{name} must be a whole number, got {type(value).__name__}"
        )

    low, high = bounds
    if not (low <= number <= high):
        raise InvalidPresetError(f"{name} must be between {low} and {high}, got {number}")
    return number


def preset_from_fields(
    hours: FieldValue = 0, minutes: FieldValue = 0, seconds: FieldValue = 0
) -> timedelta:
    """Validate the three clock fields and combine them into a duration."""
    return from_hms(
        hours=_parse_field("hours", hours, HOURS_RANGE),
        minutes=_parse_field("minutes", minutes, MINUTES_RANGE),
        seconds=_parse_field("seconds", seconds, SECONDS_RANGE),
    )


def parse_preset(text: str) -> timedelta:
    """Parse ``SS``, ``MM:SS`` or ``HH:MM:SS`` into a duration.

    The leading field of the short forms may exceed 59 (``90`` is ninety
    seconds, ``90:00`` ninety minutes) as long as the total stays under a
    day, the same ceiling ``HH:MM:SS`` has.
    """
    parts = [p.strip() for p in text.strip().split(":")]
    if not text.strip() or len(parts) > 3 or any(not p for p in parts):
        raise InvalidPresetError(f"expected SS, MM:SS or HH:MM:SS, got {text!r}")

    if len(parts) == 1:
        return from_hms(seconds=_parse_field("seconds", parts[0], _SHORT_SECONDS_RANGE))
    if len(parts) == 2:
        return from_hms(
            minutes=_parse_field("minutes", parts[0], _SHORT_MINUTES_RANGE),
            seconds=_parse_field("seconds", parts[1], SECONDS_RANGE),
        )
    return preset_from_fields(*parts)
