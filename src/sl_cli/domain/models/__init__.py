"""Domain models for SL trips and departures."""

from sl_cli.domain.models.coordinate import Coordinate
from sl_cli.domain.models.departure import Departure
from sl_cli.domain.models.error_details import ErrorDetails
from sl_cli.domain.models.resolved_location import ResolvedLocation
from sl_cli.domain.models.results import SiteDepartures, TripPlan
from sl_cli.domain.models.stop_location import LocationType, StopLocation
from sl_cli.domain.models.transport_kind import TransportKind
from sl_cli.domain.models.transport_site import TransportSite
from sl_cli.domain.models.trip import TripLeg, TripProposal
from sl_cli.domain.models.trip_endpoint import (
    EndpointByCoordinate,
    EndpointById,
    TripEndpointLocation,
)
from sl_cli.domain.models.trip_search_options import (
    DateTimeMode,
    RouteType,
    TripSearchOptions,
)
from sl_cli.domain.models.user_config import CONFIG_KEYS, ConfigKey, UserConfig

__all__ = [
    "CONFIG_KEYS",
    "ConfigKey",
    "Coordinate",
    "DateTimeMode",
    "Departure",
    "EndpointByCoordinate",
    "EndpointById",
    "ErrorDetails",
    "LocationType",
    "ResolvedLocation",
    "RouteType",
    "SiteDepartures",
    "StopLocation",
    "TransportKind",
    "TransportSite",
    "TripEndpointLocation",
    "TripLeg",
    "TripPlan",
    "TripProposal",
    "TripSearchOptions",
    "UserConfig",
]
