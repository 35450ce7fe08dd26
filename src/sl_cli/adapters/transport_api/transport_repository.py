"""Site and departure repository adapters using the SL Transport v1 API."""

import logging
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from sl_cli.adapters.transport_api.constants import SL_SOURCE_TIMEZONE, TRANSPORT_BASE_URL
from sl_cli.adapters.transport_api.departure_parser import DepartureParser
from sl_cli.adapters.transport_api.http_client import TransportHttpClient
from sl_cli.adapters.transport_api.site_parser import SiteParser
from sl_cli.domain.models.departure import Departure
from sl_cli.domain.models.transport_site import TransportSite
from sl_cli.domain.ports.departure_repository import DepartureRepository
from sl_cli.domain.ports.site_repository import SiteRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class SlTransportRepository(SiteRepository, DepartureRepository):
    """Adapter for sites and live departures using the SL Transport v1 API."""

    def __init__(self, session: "ClientSession", base_url: str = TRANSPORT_BASE_URL) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Base URL of the transport API.
        """
        self._http_client = TransportHttpClient(session, base_url=base_url)
        self._departure_parser = DepartureParser(default_tz=ZoneInfo(SL_SOURCE_TIMEZONE))

    async def get_sites(self) -> list[TransportSite]:
        """Get all known SL sites."""
        data = await self._http_client.fetch_sites()
        sites = SiteParser.parse_sites(data)
        logger.debug(f"Loaded {len(sites)} site(s)")
        return sites

    async def get_departures(self, site_id: str) -> list[Departure]:
        """Get upcoming departures for a site.

        Args:
            site_id: SL site identifier (e.g., "9001" for T-Centralen).

        Returns:
            Up to 30 departures sorted by expected time.
        """
        data = await self._http_client.fetch_departures(site_id)
        departures = self._departure_parser.parse_departures(data)
        if not departures:
            logger.debug(f"No departures returned for site {site_id}")
        return departures
