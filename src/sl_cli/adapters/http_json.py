"""Shared JSON GET helper for the SL HTTP clients."""

import logging
import time
from typing import TYPE_CHECKING, Any

from sl_cli.adapters.api_request_logger import log_api_request, log_api_response
from sl_cli.domain.errors import ApiError
from sl_cli.domain.models.error_details import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_HEADERS = {
    "Accept": "application/json",
}
ERROR_BODY_EXCERPT_LENGTH = 500


async def _raise_for_error_response(response: "ClientResponse", url: str, action: str) -> None:
    """Log the error body and raise an ApiError with status and reason."""
    error_text = await response.text()
    excerpt = error_text[:ERROR_BODY_EXCERPT_LENGTH] if error_text else None
    content_type = response.headers.get("Content-Type", "unknown")
    logger.debug(
        f"SL API returned status {response.status} for {url}: "
        f"{excerpt or '(empty response body)'} (Content-Type: {content_type})"
    )

    reason = response.reason or ""
    raise ApiError(
        f"{action} failed: HTTP {response.status} {reason}".rstrip(),
        ErrorDetails(
            action=action,
            status_code=response.status,
            reason=reason or f"HTTP {response.status}",
            url=url,
            body_excerpt=excerpt,
        ),
    )


async def get_json(
    session: "ClientSession",
    url: str,
    action: str,
    params: dict[str, str] | None = None,
) -> Any:
    """GET a URL and decode its JSON body.

    Args:
        session: aiohttp session used for the request.
        url: Endpoint URL.
        action: Human-readable name of the call, used in error messages.
        params: Query parameters.

    Returns:
        The decoded JSON body.

    Raises:
        ApiError: If the API answers with a non-success status.
    """
    log_api_request(action, url, params=params, headers=DEFAULT_HEADERS)
    logger.debug(f"{action}: GET {url} {params or {}}")

    started = time.monotonic()
    async with session.get(url, params=params, headers=DEFAULT_HEADERS) as response:
        log_api_response(action, response.status, time.monotonic() - started)
        if response.status < 200 or response.status >= 300:
            await _raise_for_error_response(response, url, action)
        return await response.json(content_type=None)
