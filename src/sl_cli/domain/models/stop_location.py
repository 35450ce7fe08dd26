"""Stop location domain model."""

from dataclasses import dataclass
from typing import Literal

from sl_cli.domain.models.coordinate import Coordinate

LocationType = Literal["stop", "address"]


@dataclass(frozen=True)
class StopLocation:
    """A candidate location returned by the journey planner's stop-finder."""

    id: str
    label: str
    coordinate: Coordinate
    type: LocationType
    match_quality: int | None
    is_best: bool
