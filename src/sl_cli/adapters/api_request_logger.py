"""Tracing of SL API calls, enabled with SLCLI_LOG_REQUESTS.

Trace lines go to INFO on the ``sl_cli.requests`` logger, so they show up
without --verbose but can still be silenced with --quiet.
"""

import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger("sl_cli.requests")

ENABLED_VALUES = frozenset({"1", "true", "yes", "on"})
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
REDACTED = "***REDACTED***"


def should_log_requests() -> bool:
    """Check whether SLCLI_LOG_REQUESTS is switched on."""
    return os.getenv("SLCLI_LOG_REQUESTS", "").strip().lower() in ENABLED_VALUES


def request_url(url: str, params: dict[str, Any] | None) -> str:
    """URL with its query string, keys sorted and values percent-encoded."""
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(sorted(params.items()))}"


def _safe_headers(headers: dict[str, str]) -> str:
    return ", ".join(
        f"{name}: {REDACTED if name.lower() in SENSITIVE_HEADERS else value}"
        for name, value in headers.items()
    )


def log_api_request(
    action: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Trace an outgoing GET.

    Args:
        action: Name of the call, e.g. "Trip search".
        url: Endpoint URL.
        params: Query parameters.
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return

    message = f"{action} -> GET {request_url(url, params)}"
    if headers:
        message += f" [{_safe_headers(headers)}]"
    logger.info(message)


def log_api_response(action: str, status: int, elapsed_seconds: float) -> None:
    """Trace the status and latency of a completed call."""
    if not should_log_requests():
        return
    logger.info(f"{action} <- HTTP {status} in {elapsed_seconds * 1000:.0f} ms")
