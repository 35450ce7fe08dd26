"""Resolution of free-text places into trip endpoints."""

import logging
from typing import TYPE_CHECKING

from sl_cli.domain.errors import InputError
from sl_cli.domain.models.coordinate import Coordinate
from sl_cli.domain.models.resolved_location import ResolvedLocation
from sl_cli.domain.models.stop_location import StopLocation
from sl_cli.domain.models.trip_endpoint import (
    EndpointByCoordinate,
    EndpointById,
    TripEndpointLocation,
)
from sl_cli.domain.models.user_config import UserConfig

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from sl_cli.domain.ports import JourneyPlannerRepository

PLACE_ALIAS_PREFIX = "@"
PLACE_ALIASES = ("home", "work")


def pick_best_location(candidates: list[StopLocation]) -> StopLocation | None:
    """Choose among stop-finder candidates.

    The planner's own best-match flag wins; otherwise the highest match
    quality (missing counts as 0), keeping planner order on ties.
    """
    if not candidates:
        return None

    best = next((loc for loc in candidates if loc.is_best), None)
    if best:
        return best

    return max(candidates, key=lambda loc: loc.match_quality or 0)


def expand_place_alias(value: str, config: UserConfig) -> str:
    """Replace "@home" / "@work" with the configured place.

    Raises:
        InputError: If the alias is not configured.
    """
    trimmed = value.strip()
    if not trimmed.startswith(PLACE_ALIAS_PREFIX):
        return trimmed

    alias = trimmed[len(PLACE_ALIAS_PREFIX) :].lower()
    if alias not in PLACE_ALIASES:
        return trimmed

    configured = (config.get(alias) or "").strip()
    if not configured:
        raise InputError(f"No '{alias}' place configured. Set it with: config set {alias} <place>")
    return configured


def choose_origin(
    cli_value: str | None, env_value: str | None, config: UserConfig
) -> str | None:
    """Pick the origin from the command line, the environment, then the config file."""
    for candidate in (cli_value, env_value, config.origin):
        if candidate and candidate.strip():
            return candidate.strip()
    return None


class LocationResolver:
    """Resolves user-typed places through the journey planner's stop-finder."""

    def __init__(self, journey_planner: "JourneyPlannerRepository") -> None:
        """Initialize with a journey planner repository."""
        self._journey_planner = journey_planner

    async def resolve(self, place: str) -> ResolvedLocation:
        """Resolve a "lat,lon" pair or a stop/address search query.

        Raises:
            InputError: If the stop-finder has no candidate for the query.
        """
        coordinate = Coordinate.parse(place)
        if coordinate:
            return ResolvedLocation(
                query=place,
                type="coord",
                endpoint=EndpointByCoordinate(coordinate=coordinate),
                coordinate=coordinate,
            )

        candidates = await self._journey_planner.search_locations(place)
        location = pick_best_location(candidates)
        if location is None:
            raise InputError(f"Failed to resolve location '{place}'.")

        logger.debug(f"Resolved '{place}' to {location.label} ({location.id})")
        return ResolvedLocation(
            query=place,
            type=location.type,
            endpoint=EndpointById(
                id=location.id, label=location.label, coordinate=location.coordinate
            ),
            id=location.id,
            label=location.label,
            coordinate=location.coordinate,
        )
