"""Protocol for rendering command results."""

from typing import Protocol

from sl_cli.domain.models import SiteDepartures, TripPlan, UserConfig


class OutputRenderer(Protocol):
    """Turns command results into the text written to stdout."""

    def render_trip_plan(self, plan: TripPlan) -> str:
        """Render the trips found by `plan`."""
        ...

    def render_departures(self, result: SiteDepartures) -> str:
        """Render the departures listed by `next`."""
        ...

    def render_config(self, config: UserConfig) -> str:
        """Render all config keys for `config list`."""
        ...

    def render_config_value(self, key: str, value: str | None) -> str:
        """Render one value for `config get`."""
        ...

    def render_config_update(self, key: str, value: str) -> str:
        """Confirm a `config set`."""
        ...
