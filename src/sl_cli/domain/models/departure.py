"""Departure domain model."""

from dataclasses import dataclass
from datetime import datetime

from sl_cli.domain.models.transport_kind import TransportKind


@dataclass(frozen=True)
class Departure:
    """Represents a single upcoming departure from a site."""

    kind: TransportKind
    line: str
    destination: str
    scheduled_time: datetime
    expected_time: datetime
    minutes_until: int
    is_delayed: bool
    is_cancelled: bool
    platform: str | None = None  # Stop point designation (e.g., "A", "3")
