"""Resolved location domain model."""

from dataclasses import dataclass
from typing import Literal

from sl_cli.domain.models.coordinate import Coordinate
from sl_cli.domain.models.trip_endpoint import TripEndpointLocation


@dataclass(frozen=True)
class ResolvedLocation:
    """A place the user typed, together with the endpoint it resolved to."""

    query: str
    type: Literal["stop", "address", "coord"]
    endpoint: TripEndpointLocation
    id: str | None = None
    label: str | None = None
    coordinate: Coordinate | None = None

    @property
    def display_name(self) -> str:
        """Label, coordinate, or the raw query, whichever is known first."""
        if self.label:
            return self.label
        if self.coordinate:
            return str(self.coordinate)
        return self.query
