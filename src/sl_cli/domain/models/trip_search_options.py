"""Trip search options domain model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Literal

DateTimeMode = Literal["dep", "arr"]
RouteType = Literal["leasttime", "leastinterchange", "leastwalking"]

MIN_TRIPS = 1
MAX_TRIPS = 3


@dataclass(frozen=True)
class TripSearchOptions:
    """Preferences forwarded to the journey planner's trip search."""

    num_trips: int = MAX_TRIPS
    date_time: datetime | None = None
    date_time_mode: DateTimeMode = "dep"
    route_type: RouteType | None = None
    max_changes: int | None = None

    @property
    def requested_trips(self) -> int:
        """Number of trips clamped to what the planner accepts."""
        return min(max(self.num_trips, MIN_TRIPS), MAX_TRIPS)
