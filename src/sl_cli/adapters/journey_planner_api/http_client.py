"""HTTP client for SL Journey Planner v2 requests.

API Documentation: https://www.trafiklab.se/api/our-apis/sl/journey-planner-2/
"""

import logging
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Any
from zoneinfo import ZoneInfo

from sl_cli.adapters.http_json import get_json
from sl_cli.adapters.journey_planner_api.constants import (
    COORDINATE_FORMAT,
    JOURNEY_PLANNER_BASE_URL,
    SL_SOURCE_TIMEZONE,
    STOP_FINDER_OBJECT_FILTER,
    STOP_FINDER_PATH,
    STOP_FINDER_TYPE,
    TRIPS_PATH,
)
from sl_cli.domain.models.coordinate import Coordinate
from sl_cli.domain.models.trip_endpoint import (
    EndpointByCoordinate,
    EndpointById,
    TripEndpointLocation,
)
from sl_cli.domain.models.trip_search_options import TripSearchOptions

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def _format_degrees(value: float) -> str:
    """Format a coordinate component without a trailing '.0'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_coordinate(coordinate: Coordinate) -> str:
    """Format a coordinate the way the planner expects it (longitude first)."""
    return COORDINATE_FORMAT.format(
        lon=_format_degrees(coordinate.longitude),
        lat=_format_degrees(coordinate.latitude),
    )


def endpoint_params(endpoint: TripEndpointLocation, role: str) -> dict[str, str]:
    """Build the type/name parameter pair for an origin or destination.

    Args:
        endpoint: Endpoint to encode.
        role: Either "origin" or "destination".
    """
    match endpoint:
        case EndpointByCoordinate(coordinate=coordinate):
            return {f"type_{role}": "coord", f"name_{role}": format_coordinate(coordinate)}
        case EndpointById(id=location_id):
            return {f"type_{role}": "any", f"name_{role}": location_id}
    raise TypeError(f"Unsupported trip endpoint: {endpoint!r}")


def trip_search_params(
    origin: TripEndpointLocation,
    destination: TripEndpointLocation,
    options: TripSearchOptions,
    input_tz: tzinfo | None = None,
) -> dict[str, str]:
    """Build the query parameters of a trip search.

    Args:
        origin: Where the trip starts.
        destination: Where the trip ends.
        options: Search preferences.
        input_tz: Timezone a naive requested date/time is given in; without it a
            naive value is taken as Stockholm wall-clock time.

    Returns:
        Query parameters for the trips endpoint.
    """
    params = {
        **endpoint_params(origin, "origin"),
        **endpoint_params(destination, "destination"),
        "calc_number_of_trips": str(options.requested_trips),
    }

    if options.date_time is not None:
        local_time = _to_planner_time(options.date_time, input_tz)
        params["itd_date"] = local_time.strftime("%Y%m%d")
        params["itd_time"] = local_time.strftime("%H%M")
        params["itd_trip_date_time_dep_arr"] = "arr" if options.date_time_mode == "arr" else "dep"

    if options.route_type:
        params["route_type"] = options.route_type

    if options.max_changes is not None:
        params["max_changes"] = str(options.max_changes)

    return params


def _to_planner_time(value: datetime, input_tz: tzinfo | None) -> datetime:
    """Convert a requested date/time to the planner's Stockholm wall-clock time."""
    if value.tzinfo is None:
        if input_tz is None:
            return value
        value = value.replace(tzinfo=input_tz)
    return value.astimezone(ZoneInfo(SL_SOURCE_TIMEZONE))


class JourneyPlannerHttpClient:
    """HTTP client for the SL Journey Planner v2 API."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = JOURNEY_PLANNER_BASE_URL,
        input_tz: tzinfo | None = None,
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Base URL of the journey planner.
            input_tz: Timezone naive requested date/times are given in.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._input_tz = input_tz

    async def fetch_stop_finder(self, query: str) -> Any:
        """Fetch raw stop-finder results for a free-text query."""
        params = {
            "name_sf": query,
            "type_sf": STOP_FINDER_TYPE,
            "any_obj_filter_sf": STOP_FINDER_OBJECT_FILTER,
        }
        return await get_json(
            self._session, f"{self._base_url}{STOP_FINDER_PATH}", "Stop-finder", params
        )

    async def fetch_trips(
        self,
        origin: TripEndpointLocation,
        destination: TripEndpointLocation,
        options: TripSearchOptions,
    ) -> Any:
        """Fetch the raw journeys payload of a trip search."""
        params = trip_search_params(origin, destination, options, self._input_tz)
        return await get_json(self._session, f"{self._base_url}{TRIPS_PATH}", "Trip search", params)
