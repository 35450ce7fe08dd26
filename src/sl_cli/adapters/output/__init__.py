"""Output renderers (JSON, line-based, human-readable)."""

from sl_cli.adapters.output.json_renderer import JsonRenderer
from sl_cli.adapters.output.output_mode import OutputMode, resolve_output_mode
from sl_cli.adapters.output.plain_renderer import PlainRenderer
from sl_cli.adapters.output.pretty_renderer import PrettyRenderer
from sl_cli.adapters.output.renderer import OutputRenderer

__all__ = [
    "JsonRenderer",
    "OutputMode",
    "OutputRenderer",
    "PlainRenderer",
    "PrettyRenderer",
    "resolve_output_mode",
]
