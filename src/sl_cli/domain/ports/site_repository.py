"""Site repository port."""

from typing import Protocol

from sl_cli.domain.models.transport_site import TransportSite


class SiteRepository(Protocol):
    """Port for retrieving the list of known sites."""

    async def get_sites(self) -> list[TransportSite]:
        """Get all known stops and stations."""
        ...
