"""Tests for place resolution and origin selection."""

from unittest.mock import AsyncMock

import pytest

from sl_cli.application.location_resolution import (
    LocationResolver,
    choose_origin,
    expand_place_alias,
    pick_best_location,
)
from sl_cli.domain.errors import InputError
from sl_cli.domain.models import (
    Coordinate,
    EndpointByCoordinate,
    EndpointById,
    StopLocation,
    UserConfig,
)


def _location(
    location_id: str, quality: int | None = None, is_best: bool = False
) -> StopLocation:
    return StopLocation(
        id=location_id,
        label=f"Stop {location_id}",
        coordinate=Coordinate(59.3, 18.0),
        type="stop",
        match_quality=quality,
        is_best=is_best,
    )


class TestPickBestLocation:
    """Tests for pick_best_location."""

    def test_when_flagged_best_then_chosen(self) -> None:
        """Given a candidate flagged best, when picking, then it wins over higher quality."""
        candidates = [_location("a", 999), _location("b", 10, is_best=True)]

        assert pick_best_location(candidates).id == "b"

    def test_when_no_flag_then_highest_quality(self) -> None:
        """Given no best flag, when picking, then the highest quality wins."""
        candidates = [_location("a", 500), _location("b", None), _location("c", 900)]

        assert pick_best_location(candidates).id == "c"

    def test_when_quality_tied_then_first(self) -> None:
        """Given equal quality, when picking, then planner order is kept."""
        candidates = [_location("a", 500), _location("b", 500)]

        assert pick_best_location(candidates).id == "a"

    def test_when_empty_then_none(self) -> None:
        """Given no candidates, when picking, then returns None."""
        assert pick_best_location([]) is None


class TestExpandPlaceAlias:
    """Tests for @home / @work expansion."""

    def test_when_alias_configured_then_expanded(self) -> None:
        """Given a configured home, when expanding @home, then returns it."""
        assert expand_place_alias("@home", UserConfig(home=" Odenplan ")) == "Odenplan"

    def test_when_alias_case_differs_then_expanded(self) -> None:
        """Given @WORK, when expanding, then the work place is used."""
        assert expand_place_alias("@WORK", UserConfig(work="Kista")) == "Kista"

    def test_when_alias_not_configured_then_input_error(self) -> None:
        """Given no work place, when expanding @work, then raises InputError."""
        with pytest.raises(InputError, match="work"):
            expand_place_alias("@work", UserConfig())

    def test_when_plain_place_then_unchanged(self) -> None:
        """Given a regular place or unknown alias, when expanding, then it is returned trimmed."""
        assert expand_place_alias(" Slussen ", UserConfig(home="x")) == "Slussen"
        assert expand_place_alias("@gym", UserConfig()) == "@gym"


class TestChooseOrigin:
    """Tests for origin precedence."""

    def test_cli_value_wins(self) -> None:
        """Given all sources, when choosing, then the command line wins."""
        assert choose_origin("A", "B", UserConfig(origin="C")) == "A"

    def test_env_value_before_config(self) -> None:
        """Given env and config, when choosing, then env wins."""
        assert choose_origin(None, "B", UserConfig(origin="C")) == "B"

    def test_config_value_last(self) -> None:
        """Given blank cli and env, when choosing, then config is used."""
        assert choose_origin("  ", "", UserConfig(origin="C")) == "C"

    def test_none_when_nothing_set(self) -> None:
        """Given no sources, when choosing, then returns None."""
        assert choose_origin(None, None, UserConfig()) is None


class TestLocationResolver:
    """Tests for LocationResolver."""

    @pytest.mark.asyncio
    async def test_when_coordinate_then_no_lookup(self) -> None:
        """Given 'lat,lon', when resolving, then a coordinate endpoint is built without lookup."""
        planner = AsyncMock()

        resolved = await LocationResolver(planner).resolve("59.33,18.06")

        assert resolved.type == "coord"
        assert resolved.endpoint == EndpointByCoordinate(Coordinate(59.33, 18.06))
        assert resolved.id is None
        planner.search_locations.assert_not_called()

    @pytest.mark.asyncio
    async def test_when_query_then_best_candidate_used(self) -> None:
        """Given a stop name, when resolving, then the best stop-finder candidate is used."""
        planner = AsyncMock()
        planner.search_locations.return_value = [_location("a", 100), _location("b", 900)]

        resolved = await LocationResolver(planner).resolve("Slussen")

        planner.search_locations.assert_awaited_once_with("Slussen")
        assert resolved.query == "Slussen"
        assert resolved.type == "stop"
        assert resolved.id == "b"
        assert resolved.label == "Stop b"
        assert resolved.endpoint == EndpointById(
            id="b", label="Stop b", coordinate=Coordinate(59.3, 18.0)
        )

    @pytest.mark.asyncio
    async def test_when_no_candidates_then_input_error(self) -> None:
        """Given no stop-finder results, when resolving, then raises InputError."""
        planner = AsyncMock()
        planner.search_locations.return_value = []

        with pytest.raises(InputError, match="Failed to resolve location 'Nowhere'."):
            await LocationResolver(planner).resolve("Nowhere")
