"""HTTP client for SL Transport v1 requests.

API Documentation: https://www.trafiklab.se/api/our-apis/sl/transport/
"""

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from sl_cli.adapters.http_json import get_json
from sl_cli.adapters.transport_api.constants import (
    DEPARTURES_PATH,
    SITES_PATH,
    TRANSPORT_BASE_URL,
)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class TransportHttpClient:
    """HTTP client for the SL Transport v1 API."""

    def __init__(self, session: "ClientSession", base_url: str = TRANSPORT_BASE_URL) -> None:
        """Initialize with an aiohttp session."""
        self._session = session
        self._base_url = base_url.rstrip("/")

    async def fetch_sites(self) -> Any:
        """Fetch the raw list of all sites."""
        return await get_json(
            self._session, f"{self._base_url}{SITES_PATH}", "Sites fetch", {"expand": "true"}
        )

    async def fetch_departures(self, site_id: str) -> Any:
        """Fetch the raw departures payload for a site."""
        path = DEPARTURES_PATH.format(site_id=quote(site_id, safe=""))
        return await get_json(self._session, f"{self._base_url}{path}", "Departures fetch")
