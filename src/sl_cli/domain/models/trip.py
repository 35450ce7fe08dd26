"""Trip domain models."""

from dataclasses import dataclass
from datetime import datetime

from sl_cli.domain.models.transport_kind import TransportKind


@dataclass(frozen=True)
class TripLeg:
    """One segment of a journey: a single ride or a walk."""

    kind: TransportKind
    line: str | None
    direction: str | None
    departure_time: datetime
    arrival_time: datetime
    duration_seconds: int
    origin_name: str
    destination_name: str
    platform: str | None = None

    @property
    def is_walk(self) -> bool:
        """Whether this leg is on foot."""
        return self.kind is TransportKind.WALK


@dataclass(frozen=True)
class TripProposal:
    """A complete suggested itinerary from origin to destination.

    Legs are never empty and never contain two consecutive walking legs.
    """

    departure_time: datetime
    arrival_time: datetime
    duration_minutes: int
    walk_to_first_leg_seconds: int
    legs: tuple[TripLeg, ...]
    route_summary: str

    @property
    def changes(self) -> int:
        """Number of interchanges between transport legs."""
        transport_legs = [leg for leg in self.legs if not leg.is_walk]
        return max(0, len(transport_legs) - 1)
