"""Command-line interface for planning SL journeys and listing departures."""

import argparse
import asyncio
import logging
import os
import sys
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import aiohttp

from sl_cli import __version__
from sl_cli.adapters.api_request_logger import should_log_requests
from sl_cli.adapters.config import AppSettings, JsonUserConfigStore
from sl_cli.adapters.journey_planner_api import SlJourneyPlannerRepository
from sl_cli.adapters.output import (
    JsonRenderer,
    OutputMode,
    OutputRenderer,
    PlainRenderer,
    PrettyRenderer,
    resolve_output_mode,
)
from sl_cli.adapters.transport_api import SlTransportRepository
from sl_cli.application.location_resolution import choose_origin, expand_place_alias
from sl_cli.application.services import DepartureService, TripPlanningService
from sl_cli.cli_input import map_optimize_to_route_type, parse_datetime_input, parse_number
from sl_cli.domain.errors import ConfigKeyError, InputError, SlCliError
from sl_cli.domain.models import CONFIG_KEYS, Coordinate, TripSearchOptions, UserConfig

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

EPILOG = """
Examples:
  # Plan a trip from the configured origin
  sl-cli plan --to "T-Centralen"

  # Plan from coordinates, arriving by 08:30
  sl-cli plan --from 59.3293,18.0686 --to "Kista" --arrive 08:30

  # Next departures from a stop (by name or site id)
  sl-cli next --stop "Slussen"
  sl-cli next --stop 9001 --minutes 15

  # Next departures from the stop nearest to a coordinate
  sl-cli next --near 59.3293,18.0686

  # Remember a default origin
  sl-cli config set origin "Odenplan"
"""


def _configure_logging(verbose: bool, quiet: bool) -> None:
    """Configure root logging to stderr."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    if should_log_requests() and not quiet:
        logging.getLogger("sl_cli.requests").setLevel(logging.INFO)


def _add_global_flags(parser: argparse.ArgumentParser, suppress_defaults: bool) -> None:
    """Add the output and logging flags.

    Subcommands re-declare them with suppressed defaults so the flags work on
    either side of the command name.
    """

    def default(value: Any) -> Any:
        return argparse.SUPPRESS if suppress_defaults else value

    parser.add_argument("--json", action="store_true", default=default(False), help="Output JSON")
    parser.add_argument(
        "--plain", action="store_true", default=default(False), help="Output line-based text"
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=default(False),
        help="Suppress non-essential output",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=default(False), help="Enable verbose logging"
    )
    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        default=default(False),
        help="Disable color output",
    )


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="sl-cli",
        description="Plan SL journeys and query departures",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    _add_global_flags(parser, suppress_defaults=False)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    global_flags = argparse.ArgumentParser(add_help=False)
    _add_global_flags(global_flags, suppress_defaults=True)

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    plan_parser = subparsers.add_parser("plan", help="Plan a trip", parents=[global_flags])
    plan_parser.add_argument(
        "--to", dest="to", required=True, help="Destination (stop, address, lat,lon, @home, @work)"
    )
    plan_parser.add_argument(
        "--from", dest="from_", help="Origin (stop, address, lat,lon, @home, @work)"
    )
    plan_parser.add_argument("--depart", help="Depart at (YYYY-MM-DD HH:mm, ISO, or HH:mm)")
    plan_parser.add_argument("--arrive", help="Arrive by (YYYY-MM-DD HH:mm, ISO, or HH:mm)")
    plan_parser.add_argument("--at", help="Alias for --depart")
    plan_parser.add_argument("--trips", help="Number of trips (1-3)")
    plan_parser.add_argument("--optimize", help="time|changes|walk")
    plan_parser.add_argument("--max-changes", dest="max_changes", help="Maximum number of changes")

    next_parser = subparsers.add_parser(
        "next", help="Show upcoming departures from a stop", parents=[global_flags]
    )
    next_parser.add_argument("--stop", help="Stop name or site id")
    next_parser.add_argument("--near", help="Use the nearest stop to lat,lon")
    next_parser.add_argument("--minutes", help="Limit to departures within N minutes")

    config_parser = subparsers.add_parser("config", help="Manage config", parents=[global_flags])
    config_subparsers = config_parser.add_subparsers(dest="config_command", help="Config action")
    config_subparsers.add_parser("list", help="List config values", parents=[global_flags])
    get_parser = config_subparsers.add_parser(
        "get", help="Get a config value", parents=[global_flags]
    )
    get_parser.add_argument("key", help=f"One of: {', '.join(CONFIG_KEYS)}")
    set_parser = config_subparsers.add_parser(
        "set", help="Set a config value", parents=[global_flags]
    )
    set_parser.add_argument("key", help=f"One of: {', '.join(CONFIG_KEYS)}")
    set_parser.add_argument("value", help="Value to store")

    return parser


def _display_timezone(settings: AppSettings, config: UserConfig) -> str:
    """Timezone for displayed times: the config file value, else the settings default."""
    configured = (config.timezone or "").strip()
    if not configured:
        return settings.timezone
    try:
        ZoneInfo(configured)
    except (ZoneInfoNotFoundError, ValueError):
        raise InputError(f"Invalid timezone in config: {configured}") from None
    return configured


def _create_renderer(mode: OutputMode, timezone: str, color: bool) -> OutputRenderer:
    """Create the renderer for an output mode."""
    if mode == "json":
        return JsonRenderer()
    if mode == "plain":
        return PlainRenderer()
    return PrettyRenderer(timezone=timezone, color=color)


def _create_session(settings: AppSettings) -> aiohttp.ClientSession:
    """Create the HTTP session used for one command."""
    timeout = aiohttp.ClientTimeout(total=settings.http_timeout_seconds)
    return aiohttp.ClientSession(timeout=timeout)


def _assert_config_key(key: str) -> None:
    if key not in CONFIG_KEYS:
        raise ConfigKeyError(f"Invalid config key. Use one of: {', '.join(CONFIG_KEYS)}")


def _build_trip_search_options(args: argparse.Namespace) -> TripSearchOptions:
    """Validate the plan flags and turn them into search options."""
    depart_value = args.depart or args.at
    arrive_value = args.arrive

    if depart_value and arrive_value:
        raise InputError("Use either --depart/--at or --arrive, not both.")

    date_time = None
    raw_date_time = depart_value or arrive_value
    if raw_date_time:
        date_time = parse_datetime_input(raw_date_time)
        if date_time is None:
            raise InputError("Invalid date/time format.")

    route_type = map_optimize_to_route_type(args.optimize)
    if args.optimize and route_type is None:
        raise InputError("Invalid --optimize value. Use time, changes or walk.")

    return TripSearchOptions(
        num_trips=parse_number(args.trips) if args.trips is not None else 3,
        date_time=date_time,
        date_time_mode="arr" if arrive_value else "dep",
        route_type=route_type,
        max_changes=parse_number(args.max_changes) if args.max_changes is not None else None,
    )


async def _handle_plan_command(
    args: argparse.Namespace,
    settings: AppSettings,
    config: UserConfig,
    renderer: OutputRenderer,
) -> str:
    """Handle the plan command."""
    origin = choose_origin(args.from_, settings.origin, config)
    if not origin:
        raise InputError("Missing origin. Provide --from or set config origin.")

    destination = (args.to or "").strip()
    if not destination:
        raise InputError("Missing destination (--to).")

    options = _build_trip_search_options(args)
    origin = expand_place_alias(origin, config)
    destination = expand_place_alias(destination, config)

    display_tz = ZoneInfo(_display_timezone(settings, config))
    async with _create_session(settings) as session:
        repository = SlJourneyPlannerRepository(
            session, base_url=settings.journey_planner_base_url, input_tz=display_tz
        )
        plan = await TripPlanningService(repository).plan(origin, destination, options)

    return renderer.render_trip_plan(plan)


async def _handle_next_command(
    args: argparse.Namespace,
    settings: AppSettings,
    renderer: OutputRenderer,
) -> str:
    """Handle the next command."""
    if not args.stop and not args.near:
        raise InputError("Provide --stop or --near.")

    near = None
    if args.near:
        near = Coordinate.parse(args.near)
        if near is None:
            raise InputError("Invalid --near coordinates. Use lat,lon.")

    max_minutes = parse_number(args.minutes) if args.minutes is not None else None

    async with _create_session(settings) as session:
        repository = SlTransportRepository(session, base_url=settings.transport_base_url)
        service = DepartureService(repository, repository)
        result = await service.next_departures(stop=args.stop, near=near, max_minutes=max_minutes)

    return renderer.render_departures(result)


def _handle_config_command(
    args: argparse.Namespace, store: JsonUserConfigStore, renderer: OutputRenderer
) -> str:
    """Handle the config list/get/set commands."""
    if args.config_command == "list":
        return renderer.render_config(store.load())

    if args.config_command == "get":
        _assert_config_key(args.key)
        return renderer.render_config_value(args.key, store.load().get(args.key))

    if args.config_command == "set":
        _assert_config_key(args.key)
        store.save(store.load().with_value(args.key, args.value))
        logger.info(f"Saved {args.key} to {store.path}")
        return renderer.render_config_update(args.key, args.value)

    raise InputError("Use one of: config list, config get <key>, config set <key> <value>.")


async def _execute_command(args: argparse.Namespace, mode: OutputMode) -> str:
    """Execute the appropriate command based on args."""
    settings = AppSettings()
    store = JsonUserConfigStore(settings.config_path())
    config = store.load()

    color = not args.no_color and not os.environ.get("NO_COLOR")
    renderer = _create_renderer(mode, _display_timezone(settings, config), color)

    if args.command == "plan":
        return await _handle_plan_command(args, settings, config, renderer)
    if args.command == "next":
        return await _handle_next_command(args, settings, renderer)
    if args.command == "config":
        return _handle_config_command(args, store, renderer)
    raise InputError(f"Unknown command: {args.command}")


def _error_message(error: Exception) -> str:
    if isinstance(error, TimeoutError):
        return "Request timed out"
    return str(error) or error.__class__.__name__


def _report_error(message: str, mode: OutputMode) -> None:
    """Print an error as JSON on stdout or as text on stderr."""
    if mode == "json":
        print(JsonRenderer.render_error(message))
    else:
        print(f"Error: {message}", file=sys.stderr)


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code (0 on success, 1 on any error).
    """
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _configure_logging(args.verbose, args.quiet)

    try:
        mode = resolve_output_mode(args.json, args.plain, sys.stdout.isatty())
    except InputError as e:
        _report_error(str(e), "pretty")
        return 1

    try:
        output = await _execute_command(args, mode)
    except (SlCliError, aiohttp.ClientError, TimeoutError, OSError, ValueError) as e:
        logger.debug("Command failed", exc_info=True)
        _report_error(_error_message(e), mode)
        return 1

    if output:
        print(output)
    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
