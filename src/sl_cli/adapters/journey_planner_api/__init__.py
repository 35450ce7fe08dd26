"""SL Journey Planner v2 adapters."""

from sl_cli.adapters.journey_planner_api.journey_planner_repository import (
    SlJourneyPlannerRepository,
)

__all__ = ["SlJourneyPlannerRepository"]
