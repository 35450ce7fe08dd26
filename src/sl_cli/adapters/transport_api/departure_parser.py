"""Parser for SL Transport departure responses."""

import logging
from datetime import UTC, datetime, timedelta, tzinfo
from typing import Any

from sl_cli.adapters.rounding import round_half_up
from sl_cli.adapters.time_parsing import parse_iso_timestamp
from sl_cli.adapters.transport_api.constants import (
    CANCELLED_STATES,
    DELAY_THRESHOLD_SECONDS,
    MAX_DEPARTURES,
    STALE_AFTER_MINUTES,
)
from sl_cli.adapters.transport_modes import classify_transport_mode
from sl_cli.domain.models.departure import Departure

logger = logging.getLogger(__name__)


def _string_or(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


class DepartureParser:
    """Parses SL Transport departure responses into Departure objects."""

    def __init__(self, default_tz: tzinfo | None = None) -> None:
        """Initialize the parser.

        Args:
            default_tz: Timezone of offset-less timestamps (SL reports Stockholm local time).
        """
        self._default_tz = default_tz

    def parse_departures(self, data: Any, now: datetime | None = None) -> list[Departure]:
        """Parse a departures response.

        Args:
            data: Decoded JSON body of the departures endpoint.
            now: Reference time for minutes-until; captured once when omitted.

        Returns:
            Up to MAX_DEPARTURES upcoming departures sorted by expected time.
        """
        raw_departures = data.get("departures") if isinstance(data, dict) else None
        if not isinstance(raw_departures, list):
            return []

        reference = now or datetime.now(UTC)
        departures = [
            departure
            for departure in (self.parse_departure(dep, reference) for dep in raw_departures)
            if departure is not None
        ]
        departures.sort(key=lambda d: d.expected_time)
        return departures[:MAX_DEPARTURES]

    def parse_departure(self, dep: Any, now: datetime) -> Departure | None:
        """Parse a single departure, or return None if it is unusable or stale."""
        try:
            return self._parse_departure(dep, now)
        except Exception as e:
            logger.debug(f"Dropping departure that failed to parse: {e}")
            return None

    def _parse_departure(self, dep: dict[str, Any], now: datetime) -> Departure | None:
        scheduled_str = dep.get("scheduled")
        if not scheduled_str:
            return None
        expected_str = dep.get("expected") or scheduled_str

        scheduled_time = parse_iso_timestamp(scheduled_str, self._default_tz)
        expected_time = parse_iso_timestamp(expected_str, self._default_tz)
        if scheduled_time is None or expected_time is None:
            return None

        minutes_until = round_half_up((expected_time - now) / timedelta(minutes=1))
        if minutes_until < STALE_AFTER_MINUTES:
            return None

        line = dep.get("line") if isinstance(dep.get("line"), dict) else {}
        stop_point = dep.get("stop_point") if isinstance(dep.get("stop_point"), dict) else {}
        platform = stop_point.get("designation")
        state = _string_or(dep.get("state"), "").upper()

        return Departure(
            kind=classify_transport_mode(_string_or(line.get("transport_mode"), "")),
            line=_string_or(line.get("designation"), ""),
            destination=_string_or(dep.get("destination"), ""),
            scheduled_time=scheduled_time,
            expected_time=expected_time,
            minutes_until=max(0, minutes_until),
            is_delayed=expected_time - scheduled_time > timedelta(seconds=DELAY_THRESHOLD_SECONDS),
            is_cancelled=state in CANCELLED_STATES,
            platform=platform if isinstance(platform, str) else None,
        )
