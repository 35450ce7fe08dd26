"""Parser for journey planner stop-finder responses."""

import logging
import math
from typing import Any

from sl_cli.domain.models.coordinate import Coordinate
from sl_cli.domain.models.stop_location import LocationType, StopLocation

logger = logging.getLogger(__name__)

# Stop-finder object types that denote an address rather than a stop
ADDRESS_TYPES = frozenset({"singlehouse", "address", "street", "poi"})


class StopFinderParser:
    """Parses stop-finder responses into StopLocation objects."""

    @staticmethod
    def parse_locations(data: Any) -> list[StopLocation]:
        """Parse the locations of a stop-finder response.

        Args:
            data: Decoded JSON body of the stop-finder endpoint.

        Returns:
            Locations with an id, a name and a valid coordinate.
        """
        locations = data.get("locations") if isinstance(data, dict) else None
        if not isinstance(locations, list):
            return []

        results = []
        for loc in locations:
            location = StopFinderParser._parse_location(loc)
            if location:
                results.append(location)
            else:
                logger.debug(f"Skipping incomplete stop-finder location: {loc!r}")
        return results

    @staticmethod
    def _parse_coordinate(raw: Any) -> Coordinate | None:
        """Parse a [lat, lon] pair."""
        if not isinstance(raw, list) or len(raw) < 2:
            return None

        try:
            latitude = float(raw[0])
            longitude = float(raw[1])
        except (TypeError, ValueError):
            return None

        if not math.isfinite(latitude) or not math.isfinite(longitude):
            return None
        return Coordinate(latitude=latitude, longitude=longitude)

    @staticmethod
    def _parse_type(raw: Any) -> LocationType:
        type_name = raw.lower() if isinstance(raw, str) else "stop"
        return "address" if type_name in ADDRESS_TYPES else "stop"

    @staticmethod
    def _parse_location(loc: Any) -> StopLocation | None:
        """Parse a single location entry."""
        if not isinstance(loc, dict):
            return None

        location_id = loc.get("id")
        label = loc.get("name")
        if not isinstance(location_id, str) or not location_id:
            return None
        if not isinstance(label, str) or not label:
            return None

        coordinate = StopFinderParser._parse_coordinate(loc.get("coord"))
        if coordinate is None:
            return None

        match_quality = loc.get("matchQuality")
        if isinstance(match_quality, bool) or not isinstance(match_quality, int | float):
            match_quality = None

        return StopLocation(
            id=location_id,
            label=label,
            coordinate=coordinate,
            type=StopFinderParser._parse_type(loc.get("type")),
            match_quality=match_quality,
            is_best=bool(loc.get("isBest")),
        )
