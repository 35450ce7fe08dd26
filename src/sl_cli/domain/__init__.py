"""Domain layer - core models, errors and ports."""

from sl_cli.domain.models import (
    Departure,
    StopLocation,
    TransportSite,
    TripLeg,
    TripProposal,
)
from sl_cli.domain.ports import (
    DepartureRepository,
    JourneyPlannerRepository,
    SiteRepository,
    UserConfigStore,
)

__all__ = [
    "Departure",
    "DepartureRepository",
    "JourneyPlannerRepository",
    "SiteRepository",
    "StopLocation",
    "TransportSite",
    "TripLeg",
    "TripProposal",
    "UserConfigStore",
]
