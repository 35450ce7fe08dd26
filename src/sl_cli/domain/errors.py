"""Errors raised by the SL client."""

from sl_cli.domain.models.error_details import ErrorDetails


class SlCliError(Exception):
    """Base class for errors reported to the user."""


class ApiError(SlCliError):
    """An upstream API answered with a non-success status."""

    def __init__(self, message: str, details: ErrorDetails) -> None:
        """Initialize with a message and structured error details."""
        super().__init__(message)
        self.details = details


class InputError(SlCliError):
    """Invalid, conflicting or unresolvable user input."""


class ConfigKeyError(InputError):
    """Unknown configuration key."""
