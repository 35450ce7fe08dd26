"""Line-based output renderer: one tab-separated record per line."""

from sl_cli.adapters.output.renderer import OutputRenderer
from sl_cli.adapters.output.serialization import iso_utc
from sl_cli.domain.models import CONFIG_KEYS, SiteDepartures, TripPlan, UserConfig


class PlainRenderer(OutputRenderer):
    """Renders results as tab-separated lines for scripts."""

    def render_trip_plan(self, plan: TripPlan) -> str:
        lines = []
        for index, trip in enumerate(plan.trips, start=1):
            fields = [
                "trip",
                str(index),
                f"dep={iso_utc(trip.departure_time)}",
                f"arr={iso_utc(trip.arrival_time)}",
                f"dur={trip.duration_minutes}m",
                f"changes={trip.changes}",
                f"summary={trip.route_summary}",
            ]
            lines.append("\t".join(fields))
        return "\n".join(lines)

    def render_departures(self, result: SiteDepartures) -> str:
        lines = []
        for dep in result.departures:
            fields = [
                "dep",
                dep.kind.value,
                dep.line,
                dep.destination,
                f"scheduled={iso_utc(dep.scheduled_time)}",
                f"expected={iso_utc(dep.expected_time)}",
                f"in={dep.minutes_until}m",
                f"platform={dep.platform or ''}",
                f"cancelled={str(dep.is_cancelled).lower()}",
            ]
            lines.append("\t".join(fields))
        return "\n".join(lines)

    def render_config(self, config: UserConfig) -> str:
        return "\n".join(f"{key}={config.get(key) or ''}" for key in CONFIG_KEYS)

    def render_config_value(self, key: str, value: str | None) -> str:
        return value or ""

    def render_config_update(self, key: str, value: str) -> str:
        return f"{key}={value}"
