"""Coordinate domain model."""

import math
import re
from dataclasses import dataclass

_COORDINATE_PATTERN = re.compile(r"^(-?\d+(?:\.\d+)?)[,\s]+(-?\d+(?:\.\d+)?)$")


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 position in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def parse(cls, text: str) -> "Coordinate | None":
        """Parse "lat,lon" (or "lat lon") text.

        Returns:
            The coordinate, or None if the text is not a pair of numbers within
            latitude/longitude range.
        """
        match = _COORDINATE_PATTERN.match(text.strip())
        if not match:
            return None

        latitude = float(match.group(1))
        longitude = float(match.group(2))
        if not math.isfinite(latitude) or not math.isfinite(longitude):
            return None
        if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
            return None
        return cls(latitude=latitude, longitude=longitude)

    def __str__(self) -> str:
        return f"{self.latitude},{self.longitude}"
