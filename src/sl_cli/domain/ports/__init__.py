"""Ports (interfaces) for the ports-and-adapters architecture."""

from sl_cli.domain.ports.departure_repository import DepartureRepository
from sl_cli.domain.ports.journey_planner_repository import JourneyPlannerRepository
from sl_cli.domain.ports.site_repository import SiteRepository
from sl_cli.domain.ports.user_config_store import UserConfigStore

__all__ = [
    "DepartureRepository",
    "JourneyPlannerRepository",
    "SiteRepository",
    "UserConfigStore",
]
