"""Site lookup: nearest site to a coordinate and name/id matching."""

import math
from collections.abc import Iterable

from sl_cli.domain.models.coordinate import Coordinate
from sl_cli.domain.models.transport_site import TransportSite

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two coordinates in kilometres."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def find_nearest_site(
    sites: Iterable[TransportSite], coordinate: Coordinate
) -> TransportSite | None:
    """Find the site closest to a coordinate.

    Sites without a coordinate are not considered. On equal distance the
    first site wins.
    """
    best: TransportSite | None = None
    best_distance = math.inf

    for site in sites:
        if site.coordinate is None:
            continue
        distance = haversine_distance_km(coordinate, site.coordinate)
        if distance < best_distance:
            best_distance = distance
            best = site

    return best


def match_site(sites: list[TransportSite], query: str) -> TransportSite | None:
    """Resolve a stop query to a single site.

    A numeric query is a site id; unknown ids still resolve to a placeholder
    site named after the id. Other queries match names case-insensitively,
    preferring an exact match, then a prefix match, then the first substring
    match.
    """
    trimmed = query.strip()
    if trimmed.isdigit():
        by_id = next((site for site in sites if site.id == trimmed), None)
        return by_id or TransportSite(id=trimmed, name=trimmed)

    needle = trimmed.lower()
    matches = [site for site in sites if needle in site.name.lower()]
    if not matches:
        return None

    exact = next((site for site in matches if site.name.lower() == needle), None)
    if exact:
        return exact

    prefix = next((site for site in matches if site.name.lower().startswith(needle)), None)
    if prefix:
        return prefix

    return matches[0]
