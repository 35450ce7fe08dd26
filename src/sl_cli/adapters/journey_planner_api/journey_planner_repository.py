"""Journey planner repository adapter using the SL Journey Planner v2 API."""

import logging
from datetime import tzinfo
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from sl_cli.adapters.journey_planner_api.constants import (
    JOURNEY_PLANNER_BASE_URL,
    SL_SOURCE_TIMEZONE,
)
from sl_cli.adapters.journey_planner_api.http_client import JourneyPlannerHttpClient
from sl_cli.adapters.journey_planner_api.journey_parser import JourneyParser
from sl_cli.adapters.journey_planner_api.stop_finder_parser import StopFinderParser
from sl_cli.domain.models.stop_location import StopLocation
from sl_cli.domain.models.trip import TripProposal
from sl_cli.domain.models.trip_endpoint import TripEndpointLocation
from sl_cli.domain.models.trip_search_options import TripSearchOptions
from sl_cli.domain.ports.journey_planner_repository import JourneyPlannerRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class SlJourneyPlannerRepository(JourneyPlannerRepository):
    """Adapter for location and trip search using the SL Journey Planner v2 API."""

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
        self._http_client = JourneyPlannerHttpClient(session, base_url=base_url, input_tz=input_tz)
        self._journey_parser = JourneyParser(default_tz=ZoneInfo(SL_SOURCE_TIMEZONE))

    async def search_locations(self, query: str) -> list[StopLocation]:
        """Search the stop-finder for locations matching a query.

        Args:
            query: Free-text stop name or address.

        Returns:
            Candidate locations in the order the planner ranked them.
        """
        data = await self._http_client.fetch_stop_finder(query)
        locations = StopFinderParser.parse_locations(data)
        logger.debug(f"Stop-finder returned {len(locations)} location(s) for '{query}'")
        return locations

    async def find_trips(
        self,
        origin: TripEndpointLocation,
        destination: TripEndpointLocation,
        options: TripSearchOptions,
    ) -> list[TripProposal]:
        """Find trip proposals between two endpoints.

        Journeys the planner returns in an unusable shape are skipped.
        """
        data = await self._http_client.fetch_trips(origin, destination, options)
        trips = self._journey_parser.parse_trips_response(data)
        logger.debug(f"Trip search returned {len(trips)} usable trip(s)")
        return trips
