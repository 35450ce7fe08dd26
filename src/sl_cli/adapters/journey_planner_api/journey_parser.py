"""Parser for journey planner trip responses (SL Journey Planner v2 format)."""

import logging
from dataclasses import replace
from datetime import datetime, tzinfo
from typing import Any

from sl_cli.adapters.rounding import delta_seconds, round_half_up, seconds_to_minutes
from sl_cli.adapters.time_parsing import parse_iso_timestamp
from sl_cli.adapters.transport_modes import classify_product_name
from sl_cli.domain.models.trip import TripLeg, TripProposal

logger = logging.getLogger(__name__)

ROUTE_SUMMARY_SEPARATOR = " -> "
WALK_ONLY_SUMMARY = "walk"
UNKNOWN_STOP_NAME = "Unknown"

# Preferred order for each time field: realtime estimate, plan, base timetable
DEPARTURE_TIME_FIELDS = (
    "departureTimeEstimated",
    "departureTimePlanned",
    "departureTimeBaseTimetable",
)
ARRIVAL_TIME_FIELDS = (
    "arrivalTimeEstimated",
    "arrivalTimePlanned",
    "arrivalTimeBaseTimetable",
)
LINE_FIELDS = ("disassembledName", "number", "name")
PLATFORM_FIELDS = ("platformName", "platform")


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _whole_seconds(value: int | float) -> int:
    if isinstance(value, int) or value.is_integer():
        return int(value)
    # Fractional seconds round half up
    return round_half_up(value)


def _first_string(record: dict[str, Any], fields: tuple[str, ...]) -> str | None:
    """Return the first non-empty string value among the given fields."""
    for field in fields:
        value = record.get(field)
        if isinstance(value, str) and value:
            return value
    return None


def _as_dict(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


class JourneyParser:
    """Parses journey planner trip responses into TripProposal objects."""

    def __init__(self, default_tz: tzinfo | None = None) -> None:
        """Initialize the parser.

        Args:
            default_tz: Timezone for timestamps that carry no offset.
        """
        self._default_tz = default_tz

    def parse_trips_response(self, data: Any) -> list[TripProposal]:
        """Parse the journeys of a trip search response.

        Args:
            data: Decoded JSON body of the trips endpoint.

        Returns:
            Trip proposals for every usable journey, in response order.
        """
        journeys = data.get("journeys") if isinstance(data, dict) else None
        if not isinstance(journeys, list):
            return []

        proposals = []
        for journey in journeys:
            proposal = self.parse_journey(journey)
            if proposal is not None:
                proposals.append(proposal)
        return proposals

    def parse_journey(self, journey: Any) -> TripProposal | None:
        """Parse a single journey, or return None if it is unusable."""
        try:
            return self._parse_journey(journey)
        except Exception as e:
            logger.debug(f"Dropping journey that failed to parse: {e}")
            return None

    def _parse_journey(self, journey: dict[str, Any]) -> TripProposal | None:
        raw_legs = journey.get("legs")
        if not isinstance(raw_legs, list) or not raw_legs:
            return None

        parsed_legs = [leg for leg in map(self.parse_leg, raw_legs) if leg is not None]
        if not parsed_legs:
            return None

        legs = merge_walking_legs(parsed_legs)
        departure_time = legs[0].departure_time
        arrival_time = legs[-1].arrival_time

        trip_duration = journey.get("tripDuration")
        if _is_number(trip_duration):
            duration_seconds = trip_duration
        else:
            duration_seconds = delta_seconds(arrival_time - departure_time)

        return TripProposal(
            departure_time=departure_time,
            arrival_time=arrival_time,
            duration_minutes=seconds_to_minutes(duration_seconds),
            walk_to_first_leg_seconds=walk_to_first_transport_seconds(legs),
            legs=tuple(legs),
            route_summary=build_route_summary(legs),
        )

    def parse_leg(self, raw_leg: Any) -> TripLeg | None:
        """Parse a single leg, or return None if it lacks stops, transport or times."""
        if not isinstance(raw_leg, dict):
            return None

        origin = _as_dict(raw_leg.get("origin"))
        destination = _as_dict(raw_leg.get("destination"))
        transportation = _as_dict(raw_leg.get("transportation"))
        if not origin or not destination or not transportation:
            return None

        departure_time = self._pick_time(origin, DEPARTURE_TIME_FIELDS)
        arrival_time = self._pick_time(destination, ARRIVAL_TIME_FIELDS)
        if departure_time is None or arrival_time is None:
            return None

        duration = raw_leg.get("duration")
        if _is_number(duration):
            duration_seconds = _whole_seconds(duration)
        else:
            duration_seconds = delta_seconds(arrival_time - departure_time)

        product = _as_dict(transportation.get("product")) or {}
        line_destination = _as_dict(transportation.get("destination")) or {}
        origin_properties = _as_dict(origin.get("properties")) or {}

        return TripLeg(
            kind=classify_product_name(_first_string(product, ("name",))),
            line=_first_string(transportation, LINE_FIELDS),
            direction=_first_string(line_destination, ("name",)),
            departure_time=departure_time,
            arrival_time=arrival_time,
            duration_seconds=duration_seconds,
            origin_name=_first_string(origin, ("name",)) or UNKNOWN_STOP_NAME,
            destination_name=_first_string(destination, ("name",)) or UNKNOWN_STOP_NAME,
            platform=_first_string(origin_properties, PLATFORM_FIELDS),
        )

    def _pick_time(self, stop: dict[str, Any], fields: tuple[str, ...]) -> datetime | None:
        """Parse the first available time among fields, in preference order."""
        value = _first_string(stop, fields)
        return parse_iso_timestamp(value, self._default_tz)


def merge_walking_legs(legs: list[TripLeg]) -> list[TripLeg]:
    """Collapse runs of consecutive walking legs into one leg.

    The merged leg keeps the first leg's departure and origin, takes the last
    leg's arrival and destination, and sums the durations.
    """
    merged: list[TripLeg] = []
    for leg in legs:
        previous = merged[-1] if merged else None
        if previous is not None and previous.is_walk and leg.is_walk:
            merged[-1] = replace(
                previous,
                arrival_time=leg.arrival_time,
                duration_seconds=previous.duration_seconds + leg.duration_seconds,
                destination_name=leg.destination_name,
            )
        else:
            merged.append(leg)
    return merged


def walk_to_first_transport_seconds(legs: list[TripLeg]) -> int:
    """Seconds spent walking before boarding the first vehicle (0 for walk-only trips)."""
    first_transport_index = next((i for i, leg in enumerate(legs) if not leg.is_walk), None)
    if first_transport_index is None:
        return 0
    return sum(leg.duration_seconds for leg in legs[:first_transport_index] if leg.is_walk)


def build_route_summary(legs: list[TripLeg]) -> str:
    """Summarize the transport legs, e.g. 'bus 4 -> metro 17'."""
    parts = [
        f"{leg.kind.value} {leg.line}" if leg.line else leg.kind.value
        for leg in legs
        if not leg.is_walk
    ]
    if not parts:
        return WALK_ONLY_SUMMARY
    return ROUTE_SUMMARY_SEPARATOR.join(parts)
