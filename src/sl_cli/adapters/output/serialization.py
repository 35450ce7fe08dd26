"""Conversion of domain objects into JSON-ready dictionaries."""

from datetime import UTC, datetime
from typing import Any

from sl_cli.adapters.rounding import seconds_to_minutes
from sl_cli.domain.models import (
    Departure,
    ResolvedLocation,
    SiteDepartures,
    TripLeg,
    TripPlan,
    TripProposal,
)


def iso_utc(value: datetime) -> str:
    """Format a datetime as a UTC ISO 8601 string with milliseconds, e.g. '2026-01-17T11:00:00.000Z'."""
    return value.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def location_to_dict(location: ResolvedLocation) -> dict[str, Any]:
    """Serialize a resolved place."""
    result: dict[str, Any] = {"query": location.query, "type": location.type}
    if location.id is not None:
        result["id"] = location.id
    if location.label is not None:
        result["label"] = location.label
    if location.coordinate is not None:
        result["coord"] = {
            "lat": location.coordinate.latitude,
            "lon": location.coordinate.longitude,
        }
    return result


def leg_to_dict(leg: TripLeg) -> dict[str, Any]:
    """Serialize a trip leg."""
    return {
        "type": leg.kind.value,
        "line": leg.line,
        "direction": leg.direction,
        "departureTime": iso_utc(leg.departure_time),
        "arrivalTime": iso_utc(leg.arrival_time),
        "durationMinutes": seconds_to_minutes(leg.duration_seconds),
        "origin": leg.origin_name,
        "destination": leg.destination_name,
        "platform": leg.platform,
    }


def trip_to_dict(trip: TripProposal) -> dict[str, Any]:
    """Serialize a trip proposal."""
    return {
        "departureTime": iso_utc(trip.departure_time),
        "arrivalTime": iso_utc(trip.arrival_time),
        "durationMinutes": trip.duration_minutes,
        "walkToFirstLegSeconds": trip.walk_to_first_leg_seconds,
        "changes": trip.changes,
        "summary": trip.route_summary,
        "legs": [leg_to_dict(leg) for leg in trip.legs],
    }


def date_time_mode(plan: TripPlan) -> str:
    """'dep', 'arr', or 'none' when no date/time was requested."""
    if plan.options.date_time is None:
        return "none"
    return plan.options.date_time_mode


def trip_plan_to_dict(plan: TripPlan) -> dict[str, Any]:
    """Serialize the result of a trip search."""
    date_time = plan.options.date_time
    return {
        "origin": location_to_dict(plan.origin),
        "destination": location_to_dict(plan.destination),
        "dateTime": iso_utc(date_time) if date_time else None,
        "dateTimeMode": date_time_mode(plan),
        "trips": [trip_to_dict(trip) for trip in plan.trips],
    }


def departure_to_dict(departure: Departure) -> dict[str, Any]:
    """Serialize a departure."""
    return {
        "type": departure.kind.value,
        "line": departure.line,
        "destination": departure.destination,
        "scheduledTime": iso_utc(departure.scheduled_time),
        "expectedTime": iso_utc(departure.expected_time),
        "minutesUntil": departure.minutes_until,
        "isDelayed": departure.is_delayed,
        "isCancelled": departure.is_cancelled,
        "platform": departure.platform,
    }


def site_departures_to_dict(result: SiteDepartures) -> dict[str, Any]:
    """Serialize departures at a site."""
    return {
        "site": {"id": result.site.id, "name": result.site.name},
        "departures": [departure_to_dict(dep) for dep in result.departures],
    }
