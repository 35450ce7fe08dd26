"""Command result domain models."""

from dataclasses import dataclass

from sl_cli.domain.models.departure import Departure
from sl_cli.domain.models.resolved_location import ResolvedLocation
from sl_cli.domain.models.transport_site import TransportSite
from sl_cli.domain.models.trip import TripProposal
from sl_cli.domain.models.trip_search_options import TripSearchOptions


@dataclass(frozen=True)
class TripPlan:
    """Result of a trip search."""

    origin: ResolvedLocation
    destination: ResolvedLocation
    options: TripSearchOptions
    trips: list[TripProposal]


@dataclass(frozen=True)
class SiteDepartures:
    """Upcoming departures at a resolved site."""

    site: TransportSite
    departures: list[Departure]
