"""Application layer - use cases built on the domain ports."""

from sl_cli.application.services import DepartureService, TripPlanningService

__all__ = ["DepartureService", "TripPlanningService"]
