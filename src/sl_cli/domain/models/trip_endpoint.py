"""Trip endpoint domain models.

An endpoint is either a location known to the journey planner (referenced by
its identifier) or a bare coordinate pair.
"""

from dataclasses import dataclass

from sl_cli.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class EndpointById:
    """Endpoint referencing a stop-finder location by identifier."""

    id: str
    label: str | None = None
    coordinate: Coordinate | None = None


@dataclass(frozen=True)
class EndpointByCoordinate:
    """Endpoint given as a raw coordinate."""

    coordinate: Coordinate


TripEndpointLocation = EndpointById | EndpointByCoordinate
