"""Parsing of command-line input values."""

import math
import re
from datetime import datetime

from sl_cli.domain.errors import InputError
from sl_cli.domain.models.trip_search_options import RouteType

_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_DATE_TIME_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})[ T](\d{2}):(\d{2})$")
_TIME_PATTERN = re.compile(r"^(\d{2}):(\d{2})$")

OPTIMIZE_ROUTE_TYPES: dict[str, RouteType] = {
    "time": "leasttime",
    "changes": "leastinterchange",
    "walk": "leastwalking",
}


def parse_datetime_input(text: str, now: datetime | None = None) -> datetime | None:
    """Parse a date/time argument.

    Accepted forms, tried in order:

    - ``YYYY-MM-DD``: local midnight of that day
    - ``YYYY-MM-DD HH:MM`` or ``YYYY-MM-DDTHH:MM``: local time
    - ``HH:MM``: that time today
    - anything ``datetime.fromisoformat`` accepts (a trailing ``Z`` means UTC)

    Args:
        text: Raw argument.
        now: Reference for "today"; defaults to the current local time.

    Returns:
        A naive local datetime (or an aware one for ISO input with an offset),
        or None if the text is not a valid date/time.
    """
    trimmed = text.strip()

    try:
        if match := _DATE_PATTERN.match(trimmed):
            year, month, day = map(int, match.groups())
            return datetime(year, month, day)

        if match := _DATE_TIME_PATTERN.match(trimmed):
            year, month, day, hour, minute = map(int, match.groups())
            return datetime(year, month, day, hour, minute)

        if match := _TIME_PATTERN.match(trimmed):
            hour, minute = map(int, match.groups())
            today = now or datetime.now()
            return today.replace(hour=hour, minute=minute, second=0, microsecond=0)

        return datetime.fromisoformat(trimmed.replace("Z", "+00:00"))
    except ValueError:
        return None


def parse_number(value: str) -> int:
    """Parse an integer option value (argparse ``type=`` callable)."""
    try:
        number = float(value)
    except ValueError:
        raise InputError(f"Invalid number: {value}") from None
    if not math.isfinite(number) or not number.is_integer():
        raise InputError(f"Invalid number: {value}")
    return int(number)


def map_optimize_to_route_type(value: str | None) -> RouteType | None:
    """Map --optimize time|changes|walk to the planner's route type."""
    if not value:
        return None
    return OPTIMIZE_ROUTE_TYPES.get(value.strip().lower())
