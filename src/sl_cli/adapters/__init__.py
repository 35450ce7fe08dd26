"""Adapters layer - external system integrations."""

from sl_cli.adapters.config import AppSettings, JsonUserConfigStore
from sl_cli.adapters.journey_planner_api import SlJourneyPlannerRepository
from sl_cli.adapters.transport_api import SlTransportRepository

__all__ = [
    "AppSettings",
    "JsonUserConfigStore",
    "SlJourneyPlannerRepository",
    "SlTransportRepository",
]
