"""Retry with exponential backoff for transient upstream failures."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

import httpx

_logger = logging.getLogger(__name__)

T = TypeVar("T")

_SERVER_ERROR_STATUS = 500


def is_transient(exc: Exception) -> bool:
    """Return True for server-side HTTP failures worth retrying."""
    return (
        isinstance(exc, httpx.HTTPStatusError)
        and exc.response.status_code >= _SERVER_ERROR_STATUS
    )


async def call_with_retry(
    func: Callable[[], Awaitable[T]],
    *,
    max_retries: int = 2,
    base_delay_seconds: float = 1.0,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Call an async function, retrying transient failures with backoff.

    The delay before retry ``n`` (0-based) is ``base_delay_seconds * 2**n``.
    Rate-limit, client and validation errors are raised immediately.
    """
    attempt = 0
    while True:
        try:
            return await func()
        except Exception as exc:
            if not is_transient(exc) or attempt >= max_retries:
                raise
            delay = base_delay_seconds * 2**attempt
            attempt += 1
            _logger.warning(
                "Upstream call failed (attempt %s/%s, status=%s), retrying in %.1fs",
                attempt,
                max_retries + 1,
                _status_code_from_exception(exc),
                delay,
            )
            await sleep(delay)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
