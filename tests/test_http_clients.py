"""Tests for the SL HTTP clients and repositories."""

from datetime import UTC, datetime, timedelta
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from sl_cli.adapters.journey_planner_api import SlJourneyPlannerRepository
from sl_cli.adapters.journey_planner_api.http_client import (
    JourneyPlannerHttpClient,
    endpoint_params,
    format_coordinate,
    trip_search_params,
)
from sl_cli.adapters.transport_api import SlTransportRepository
from sl_cli.domain.errors import ApiError
from sl_cli.domain.models import (
    Coordinate,
    EndpointByCoordinate,
    EndpointById,
    TripSearchOptions,
)

STOCKHOLM = ZoneInfo("Europe/Stockholm")


class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, status: int = 200, body: Any = None, reason: str = "OK") -> None:
        """Initialize with status, JSON body and reason."""
        self.status = status
        self.reason = reason
        self.headers = {"Content-Type": "application/json"}
        self._body = body

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def json(self, content_type: str | None = None) -> Any:  # noqa: ARG002
        """Return the configured body."""
        return self._body

    async def text(self) -> str:
        """Return the body as text."""
        return str(self._body or "")


class FakeSession:
    """Records GET requests and answers with a fixed response."""

    def __init__(self, response: FakeResponse) -> None:
        """Initialize with the response to return."""
        self.response = response
        self.requests: list[tuple[str, dict[str, str] | None]] = []

    def get(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,  # noqa: ARG002
    ) -> FakeResponse:
        """Record the request and return the response."""
        self.requests.append((url, params))
        return self.response


class TestTripSearchParams:
    """Tests for trip search query parameters."""

    def test_format_coordinate_is_longitude_first(self) -> None:
        """Given a coordinate, when formatting, then longitude comes first without '.0'."""
        assert format_coordinate(Coordinate(59.33, 18.0)) == "18:59.33:WGS84[dd.ddddd]"

    def test_endpoint_params_by_id(self) -> None:
        """Given an id endpoint, when encoding, then type is 'any' and name is the id."""
        assert endpoint_params(EndpointById(id="9091"), "origin") == {
            "type_origin": "any",
            "name_origin": "9091",
        }

    def test_endpoint_params_by_coordinate(self) -> None:
        """Given a coordinate endpoint, when encoding, then type is 'coord'."""
        params = endpoint_params(EndpointByCoordinate(Coordinate(59.3, 18.1)), "destination")

        assert params == {
            "type_destination": "coord",
            "name_destination": "18.1:59.3:WGS84[dd.ddddd]",
        }

    def test_endpoint_params_unsupported_type(self) -> None:
        """Given something that is not an endpoint, when encoding, then raises TypeError."""
        with pytest.raises(TypeError):
            endpoint_params("Slussen", "origin")  # type: ignore[arg-type]

    def test_minimal_search(self) -> None:
        """Given default options, when building params, then only endpoints and count are set."""
        params = trip_search_params(EndpointById(id="1"), EndpointById(id="2"), TripSearchOptions())

        assert params == {
            "type_origin": "any",
            "name_origin": "1",
            "type_destination": "any",
            "name_destination": "2",
            "calc_number_of_trips": "3",
        }

    def test_full_search(self) -> None:
        """Given all options, when building params, then date, mode, route and changes are set."""
        options = TripSearchOptions(
            num_trips=7,
            date_time=datetime(2026, 1, 17, 8, 5),
            date_time_mode="arr",
            route_type="leastwalking",
            max_changes=0,
        )

        params = trip_search_params(EndpointById(id="1"), EndpointById(id="2"), options)

        assert params["calc_number_of_trips"] == "3"
        assert params["itd_date"] == "20260117"
        assert params["itd_time"] == "0805"
        assert params["itd_trip_date_time_dep_arr"] == "arr"
        assert params["route_type"] == "leastwalking"
        assert params["max_changes"] == "0"

    def test_aware_datetime_sent_in_stockholm_time(self) -> None:
        """Given a UTC date/time, when building params, then it is sent in Stockholm time."""
        options = TripSearchOptions(date_time=datetime(2026, 1, 17, 23, 30, tzinfo=UTC))

        params = trip_search_params(EndpointById(id="1"), EndpointById(id="2"), options)

        assert params["itd_date"] == "20260118"
        assert params["itd_time"] == "0030"
        assert params["itd_trip_date_time_dep_arr"] == "dep"

    def test_naive_datetime_read_in_input_timezone(self) -> None:
        """Given a naive date/time and a New York input zone, when building params, then it is shifted to Stockholm."""
        options = TripSearchOptions(date_time=datetime(2026, 1, 17, 12, 0))

        params = trip_search_params(
            EndpointById(id="1"),
            EndpointById(id="2"),
            options,
            ZoneInfo("America/New_York"),
        )

        assert params["itd_date"] == "20260117"
        assert params["itd_time"] == "1800"


class TestJourneyPlannerHttpClient:
    """Tests for JourneyPlannerHttpClient."""

    @pytest.mark.asyncio
    async def test_fetch_stop_finder_sends_query(self) -> None:
        """Given a query, when fetching, then stop-finder params are sent."""
        session = FakeSession(FakeResponse(body={"locations": []}))
        client = JourneyPlannerHttpClient(session, base_url="https://planner.test/v2/")  # type: ignore[arg-type]

        data = await client.fetch_stop_finder("Slussen")

        assert data == {"locations": []}
        url, params = session.requests[0]
        assert url == "https://planner.test/v2/stop-finder"
        assert params == {"name_sf": "Slussen", "type_sf": "any", "any_obj_filter_sf": "46"}

    @pytest.mark.asyncio
    async def test_error_status_raises_api_error(self) -> None:
        """Given a 500 response, when fetching trips, then raises ApiError with details."""
        session = FakeSession(FakeResponse(status=500, body="boom", reason="Internal Server Error"))
        client = JourneyPlannerHttpClient(session)  # type: ignore[arg-type]

        with pytest.raises(ApiError) as exc_info:
            await client.fetch_trips(EndpointById(id="1"), EndpointById(id="2"), TripSearchOptions())

        assert str(exc_info.value) == "Trip search failed: HTTP 500 Internal Server Error"
        details = exc_info.value.details
        assert details.action == "Trip search"
        assert details.status_code == 500
        assert details.reason == "Internal Server Error"
        assert details.url == "https://journeyplanner.integration.sl.se/v2/trips"
        assert details.body_excerpt == "boom"


class TestRepositories:
    """Tests for the repository adapters over a fake session."""

    @pytest.mark.asyncio
    async def test_search_locations_parses_response(self) -> None:
        """Given a stop-finder response, when searching, then locations are parsed."""
        body = {
            "locations": [
                {"id": "9091", "name": "Slussen", "coord": [59.3, 18.07], "isBest": True}
            ]
        }
        repository = SlJourneyPlannerRepository(FakeSession(FakeResponse(body=body)))  # type: ignore[arg-type]

        locations = await repository.search_locations("Slussen")

        assert [loc.id for loc in locations] == ["9091"]

    @pytest.mark.asyncio
    async def test_get_sites_requests_expanded_list(self) -> None:
        """Given a sites response, when loading sites, then expand=true is sent."""
        session = FakeSession(FakeResponse(body=[{"id": 9001, "name": "T-Centralen"}]))
        repository = SlTransportRepository(session, base_url="https://transport.test/v1")  # type: ignore[arg-type]

        sites = await repository.get_sites()

        assert [site.id for site in sites] == ["9001"]
        assert session.requests == [("https://transport.test/v1/sites", {"expand": "true"})]

    @pytest.mark.asyncio
    async def test_get_departures_quotes_site_id(self) -> None:
        """Given a site id with special characters, when fetching, then it is URL-quoted."""
        session = FakeSession(FakeResponse(body={"departures": []}))
        repository = SlTransportRepository(session, base_url="https://transport.test/v1")  # type: ignore[arg-type]

        departures = await repository.get_departures("a/b")

        assert departures == []
        assert session.requests[0][0] == "https://transport.test/v1/sites/a%2Fb/departures"

    @pytest.mark.asyncio
    async def test_get_departures_not_found(self) -> None:
        """Given a 404 response, when fetching departures, then raises ApiError."""
        session = FakeSession(FakeResponse(status=404, body=None, reason="Not Found"))
        repository = SlTransportRepository(session)  # type: ignore[arg-type]

        with pytest.raises(ApiError, match="Departures fetch failed: HTTP 404 Not Found"):
            await repository.get_departures("1234")

    @pytest.mark.asyncio
    async def test_get_departures_reads_offsetless_times_as_stockholm(self) -> None:
        """Given an offset-less departure time, when fetching, then it is read as Stockholm time."""
        scheduled = (datetime.now(STOCKHOLM) + timedelta(minutes=10)).replace(microsecond=0)
        session = FakeSession(
            FakeResponse(
                body={
                    "departures": [
                        {
                            "scheduled": scheduled.strftime("%Y-%m-%dT%H:%M:%S"),
                            "line": {"designation": "17", "transport_mode": "METRO"},
                            "destination": "Åkeshov",
                        }
                    ]
                }
            )
        )
        repository = SlTransportRepository(session)  # type: ignore[arg-type]

        departures = await repository.get_departures("9001")

        assert [dep.scheduled_time for dep in departures] == [scheduled]
        assert [dep.minutes_until for dep in departures] == [10]
