"""Tests for command-line value parsing."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from sl_cli.cli_input import map_optimize_to_route_type, parse_datetime_input, parse_number
from sl_cli.domain.errors import InputError


class TestParseDatetimeInput:
    """Tests for parse_datetime_input."""

    def test_date_only_is_local_midnight(self) -> None:
        """Given YYYY-MM-DD, when parsing, then returns midnight of that day."""
        assert parse_datetime_input("2026-01-17") == datetime(2026, 1, 17)

    @pytest.mark.parametrize("text", ["2026-01-17 12:00", "2026-01-17T12:00"])
    def test_date_and_time(self, text: str) -> None:
        """Given a date and time, when parsing, then returns that local time."""
        assert parse_datetime_input(text) == datetime(2026, 1, 17, 12, 0)

    def test_time_only_uses_today(self) -> None:
        """Given HH:MM, when parsing, then returns that time on the reference day."""
        now = datetime(2026, 3, 5, 8, 42, 17, 123)

        assert parse_datetime_input(" 12:30 ", now=now) == datetime(2026, 3, 5, 12, 30)

    def test_iso_with_zone(self) -> None:
        """Given ISO 8601 with Z, when parsing, then returns an aware UTC datetime."""
        assert parse_datetime_input("2026-01-17T12:00:00Z") == datetime(
            2026, 1, 17, 12, 0, tzinfo=UTC
        )

    def test_iso_with_offset(self) -> None:
        """Given ISO 8601 with an offset, when parsing, then the offset is kept."""
        parsed = parse_datetime_input("2026-01-17T12:00:00+01:00")

        assert parsed is not None
        assert parsed.utcoffset() == timedelta(hours=1)
        assert parsed.tzinfo == timezone(timedelta(hours=1))

    @pytest.mark.parametrize("text", ["not-a-date", "25:00", "2026-13-01", "2026-01-17 24:00", ""])
    def test_invalid_returns_none(self, text: str) -> None:
        """Given malformed or out-of-range input, when parsing, then returns None."""
        assert parse_datetime_input(text, now=datetime(2026, 1, 17)) is None


class TestParseNumber:
    """Tests for parse_number."""

    @pytest.mark.parametrize(("text", "expected"), [("3", 3), ("0", 0), ("2.0", 2), ("-1", -1)])
    def test_valid(self, text: str, expected: int) -> None:
        """Given an integer string, when parsing, then returns the int."""
        assert parse_number(text) == expected

    @pytest.mark.parametrize("text", ["abc", "1.5", "inf", "nan", ""])
    def test_invalid(self, text: str) -> None:
        """Given a non-integer, when parsing, then raises InputError."""
        with pytest.raises(InputError, match="Invalid number"):
            parse_number(text)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("time", "leasttime"),
        ("changes", "leastinterchange"),
        (" Walk ", "leastwalking"),
        ("fastest", None),
        (None, None),
        ("", None),
    ],
)
def test_map_optimize_to_route_type(value: str | None, expected: str | None) -> None:
    """Given an --optimize value, when mapping, then returns the planner route type."""
    assert map_optimize_to_route_type(value) == expected
