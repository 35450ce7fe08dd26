"""Departure repository port."""

from typing import Protocol

from sl_cli.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving departure information."""

    async def get_departures(self, site_id: str) -> list[Departure]:
        """Get upcoming departures for a site, sorted by expected time."""
        ...
