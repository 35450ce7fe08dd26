"""Rounding helpers for durations derived from timestamps."""

import math
from datetime import timedelta


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return math.floor(value + 0.5)


def delta_seconds(delta: timedelta) -> int:
    """Whole seconds in a time delta, floored at zero."""
    return max(0, round_half_up(delta.total_seconds()))


def seconds_to_minutes(seconds: float) -> int:
    """Whole minutes in a number of seconds, floored at zero."""
    return max(0, round_half_up(seconds / 60))
