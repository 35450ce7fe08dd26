"""JSON output renderer."""

import json
from typing import Any

from sl_cli.adapters.output.renderer import OutputRenderer
from sl_cli.adapters.output.serialization import site_departures_to_dict, trip_plan_to_dict
from sl_cli.domain.models import SiteDepartures, TripPlan, UserConfig


def dump_json(payload: Any) -> str:
    """Serialize a payload the way every JSON response is printed."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


class JsonRenderer(OutputRenderer):
    """Renders results as indented JSON documents."""

    def render_trip_plan(self, plan: TripPlan) -> str:
        return dump_json(trip_plan_to_dict(plan))

    def render_departures(self, result: SiteDepartures) -> str:
        return dump_json(site_departures_to_dict(result))

    def render_config(self, config: UserConfig) -> str:
        return dump_json(config.model_dump(exclude_none=True))

    def render_config_value(self, key: str, value: str | None) -> str:
        return dump_json({"key": key, "value": value})

    def render_config_update(self, key: str, value: str) -> str:
        return dump_json({"key": key, "value": value})

    @staticmethod
    def render_error(message: str) -> str:
        """Render an error as {"error": message}."""
        return dump_json({"error": message})
