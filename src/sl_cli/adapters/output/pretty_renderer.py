"""Human-readable output renderer for terminals."""

from datetime import datetime
from zoneinfo import ZoneInfo

from sl_cli.adapters.output.plain_renderer import PlainRenderer
from sl_cli.adapters.output.serialization import date_time_mode
from sl_cli.domain.models import Departure, SiteDepartures, TripLeg, TripPlan

# ANSI escape sequences
BOLD = "\033[1m"
DIM = "\033[2m"
RED = "\033[31m"
YELLOW = "\033[33m"
RESET = "\033[0m"


class PrettyRenderer(PlainRenderer):
    """Renders trips and departures as readable text in a local timezone.

    Config commands print the same as the line-based renderer.
    """

    def __init__(self, timezone: str, color: bool = True) -> None:
        """Initialize the renderer.

        Args:
            timezone: IANA timezone that times are displayed in.
            color: Whether to emit ANSI colour codes.
        """
        self._timezone = ZoneInfo(timezone)
        self._color = color

    def _style(self, text: str, *codes: str) -> str:
        if not self._color or not codes:
            return text
        return f"{''.join(codes)}{text}{RESET}"

    def format_time(self, value: datetime) -> str:
        """Format as HH:MM in the display timezone; naive values are already local."""
        local = value.astimezone(self._timezone) if value.tzinfo else value
        return local.strftime("%H:%M")

    def format_date_time(self, value: datetime) -> str:
        """Format as YYYY-MM-DD HH:MM in the display timezone."""
        local = value.astimezone(self._timezone) if value.tzinfo else value
        return local.strftime("%Y-%m-%d %H:%M")

    def _format_leg(self, leg: TripLeg) -> str:
        line = f" {leg.line}" if leg.line else ""
        direction = f" toward {leg.direction}" if leg.direction else ""
        platform = f" platform {leg.platform}" if leg.platform else ""
        times = f"{self.format_time(leg.departure_time)}-{self.format_time(leg.arrival_time)}"
        mode = self._style(f"{leg.kind.value}{line}", DIM if leg.is_walk else BOLD)
        return (
            f"  {mode}{direction}: {leg.origin_name} -> {leg.destination_name} {times}{platform}"
        )

    def render_trip_plan(self, plan: TripPlan) -> str:
        lines = [f"From: {plan.origin.display_name} -> {plan.destination.display_name}"]

        mode = date_time_mode(plan)
        if plan.options.date_time is not None and mode != "none":
            label = "Arrive" if mode == "arr" else "Depart"
            lines.append(f"{label}: {self.format_date_time(plan.options.date_time)}")

        if not plan.trips:
            lines.append("No trips found.")

        for index, trip in enumerate(plan.trips, start=1):
            header = (
                f"Trip {index}: {self.format_time(trip.departure_time)} -> "
                f"{self.format_time(trip.arrival_time)} "
                f"({trip.duration_minutes} min, {trip.changes} changes)"
            )
            lines.append(self._style(header, BOLD))
            lines.extend(self._format_leg(leg) for leg in trip.legs)

        return "\n".join(lines)

    def _format_departure(self, dep: Departure) -> str:
        platform = f" platform {dep.platform}" if dep.platform else ""
        delay = self._style(" delayed", YELLOW) if dep.is_delayed else ""
        cancelled = self._style(" cancelled", RED) if dep.is_cancelled else ""
        return (
            f"{self.format_time(dep.expected_time)} {dep.kind.value} {dep.line} "
            f"to {dep.destination} in {dep.minutes_until}m{platform}{delay}{cancelled}"
        )

    def render_departures(self, result: SiteDepartures) -> str:
        lines = [self._style(f"Stop: {result.site.name} ({result.site.id})", BOLD)]
        if not result.departures:
            lines.append("No upcoming departures.")
        lines.extend(self._format_departure(dep) for dep in result.departures)
        return "\n".join(lines)
