"""Journey planner repository port."""

from typing import Protocol

from sl_cli.domain.models.stop_location import StopLocation
from sl_cli.domain.models.trip import TripProposal
from sl_cli.domain.models.trip_endpoint import TripEndpointLocation
from sl_cli.domain.models.trip_search_options import TripSearchOptions


class JourneyPlannerRepository(Protocol):
    """Port for searching locations and trips."""

    async def search_locations(self, query: str) -> list[StopLocation]:
        """Search the stop-finder for locations matching a free-text query."""
        ...

    async def find_trips(
        self,
        origin: TripEndpointLocation,
        destination: TripEndpointLocation,
        options: TripSearchOptions,
    ) -> list[TripProposal]:
        """Find trip proposals between two endpoints."""
        ...
