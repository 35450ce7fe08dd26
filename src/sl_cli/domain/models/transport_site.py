"""Transport site domain model."""

from dataclasses import dataclass

from sl_cli.domain.models.coordinate import Coordinate


@dataclass(frozen=True)
class TransportSite:
    """Represents a physical stop or station."""

    id: str
    name: str
    coordinate: Coordinate | None = None
    products: tuple[str, ...] = ()
