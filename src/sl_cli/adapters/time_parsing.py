"""Parsing of ISO 8601 timestamps returned by the SL APIs."""

from datetime import datetime, tzinfo


def parse_iso_timestamp(value: object, default_tz: tzinfo | None = None) -> datetime | None:
    """Parse an ISO 8601 timestamp string into an aware datetime.

    Args:
        value: Raw value from an API response.
        default_tz: Timezone for timestamps without an offset; the system
            timezone is used when omitted.

    Returns:
        Parsed datetime, or None if the value is empty or not a timestamp.
    """
    if not isinstance(value, str) or not value:
        return None

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=default_tz) if default_tz else parsed.astimezone()
    return parsed
