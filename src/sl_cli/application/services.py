"""Application services (use cases) for trip planning and departures."""

import logging
from typing import TYPE_CHECKING

from sl_cli.application.location_resolution import LocationResolver
from sl_cli.application.site_lookup import find_nearest_site, match_site
from sl_cli.domain.errors import InputError
from sl_cli.domain.models import (
    SiteDepartures,
    TransportSite,
    TripPlan,
    TripSearchOptions,
)
from sl_cli.domain.models.coordinate import Coordinate

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sl_cli.domain.ports import (
        DepartureRepository,
        JourneyPlannerRepository,
        SiteRepository,
    )


class TripPlanningService:
    """Service for resolving places and searching trips between them."""

    def __init__(self, journey_planner: "JourneyPlannerRepository") -> None:
        """Initialize with a journey planner repository."""
        self._journey_planner = journey_planner
        self._resolver = LocationResolver(journey_planner)

    async def plan(self, origin: str, destination: str, options: TripSearchOptions) -> TripPlan:
        """Resolve both places, then search trips between them.

        Args:
            origin: Free-text origin ("lat,lon", stop name or address).
            destination: Free-text destination.
            options: Search preferences.

        Returns:
            The resolved endpoints and the proposals found.
        """
        resolved_origin = await self._resolver.resolve(origin)
        resolved_destination = await self._resolver.resolve(destination)

        trips = await self._journey_planner.find_trips(
            resolved_origin.endpoint, resolved_destination.endpoint, options
        )
        logger.info(
            f"Found {len(trips)} trip(s) from {resolved_origin.display_name} "
            f"to {resolved_destination.display_name}"
        )
        return TripPlan(
            origin=resolved_origin,
            destination=resolved_destination,
            options=options,
            trips=trips,
        )


class DepartureService:
    """Service for resolving a site and listing its upcoming departures."""

    def __init__(
        self,
        site_repository: "SiteRepository",
        departure_repository: "DepartureRepository",
    ) -> None:
        """Initialize with site and departure repositories."""
        self._site_repository = site_repository
        self._departure_repository = departure_repository

    async def resolve_site(
        self, stop: str | None = None, near: Coordinate | None = None
    ) -> TransportSite:
        """Resolve a site by nearest coordinate or by name/id.

        Raises:
            InputError: If neither input is given or no site matches.
        """
        if stop is None and near is None:
            raise InputError("Provide --stop or --near.")

        sites = await self._site_repository.get_sites()
        site = find_nearest_site(sites, near) if near else match_site(sites, stop or "")
        if site is None:
            raise InputError("Unable to resolve stop.")

        logger.debug(f"Resolved stop to {site.name} ({site.id})")
        return site

    async def next_departures(
        self,
        stop: str | None = None,
        near: Coordinate | None = None,
        max_minutes: int | None = None,
    ) -> SiteDepartures:
        """List upcoming departures at a site.

        Args:
            stop: Stop name or numeric site id.
            near: Coordinate to find the nearest site to (takes precedence over stop).
            max_minutes: Only keep departures leaving within this many minutes.
        """
        site = await self.resolve_site(stop=stop, near=near)
        departures = await self._departure_repository.get_departures(site.id)

        if max_minutes:
            departures = [d for d in departures if d.minutes_until <= max_minutes]

        return SiteDepartures(site=site, departures=departures)
