"""Parser for SL Transport sites responses."""

from typing import Any

from sl_cli.domain.models.coordinate import Coordinate
from sl_cli.domain.models.transport_site import TransportSite


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class SiteParser:
    """Parses the sites list into TransportSite objects."""

    @staticmethod
    def parse_sites(data: Any) -> list[TransportSite]:
        """Parse a sites response (a JSON array of site records)."""
        if not isinstance(data, list):
            return []
        return [SiteParser._parse_site(site) for site in data if isinstance(site, dict)]

    @staticmethod
    def _parse_site(site: dict[str, Any]) -> TransportSite:
        site_id = site.get("id")
        name = site.get("name")
        lat = site.get("lat")
        lon = site.get("lon")
        products = site.get("products")

        coordinate = None
        if _is_number(lat) and _is_number(lon):
            coordinate = Coordinate(latitude=float(lat), longitude=float(lon))

        return TransportSite(
            id=str(site_id) if site_id is not None else "",
            name=name if isinstance(name, str) else "",
            coordinate=coordinate,
            products=tuple(str(p) for p in products) if isinstance(products, list) else (),
        )
