"""Translation of upstream failures into analysis errors."""

import httpx

from calorie_tracker.domain.errors import AnalysisError, ErrorCode

_UNAUTHORIZED = 401
_TOO_MANY_REQUESTS = 429
_SERVER_ERROR = 500


def translate_error(exc: Exception) -> AnalysisError:
    """Map an exception raised while analyzing into an ``AnalysisError``."""
    if isinstance(exc, AnalysisError):
        return exc
    if isinstance(exc, httpx.TimeoutException):
        return AnalysisError(
            "Request timed out. Please check your connection.",
            ErrorCode.TIMEOUT,
            retryable=True,
        )
    if isinstance(exc, httpx.HTTPStatusError):
        return _from_status(exc)
    if isinstance(exc, httpx.RequestError):
        return AnalysisError(
            "Network error. Please check your internet connection.",
            ErrorCode.NETWORK_ERROR,
            retryable=True,
        )
    return AnalysisError(
        str(exc) or "An unexpected error occurred",
        ErrorCode.UNKNOWN_ERROR,
        retryable=False,
    )


def _from_status(exc: httpx.HTTPStatusError) -> AnalysisError:
    status_code = exc.response.status_code
    if status_code == _UNAUTHORIZED:
        return AnalysisError(
            "Invalid API key. Please check your configuration.",
            ErrorCode.AUTH_ERROR,
            retryable=False,
        )
    if status_code == _TOO_MANY_REQUESTS:
        return AnalysisError(
            "Rate limit exceeded. Please wait a moment.",
            ErrorCode.RATE_LIMIT,
            retryable=True,
        )
    if status_code >= _SERVER_ERROR:
        return AnalysisError(
            "AI service is temporarily unavailable.",
            ErrorCode.SERVER_ERROR,
            retryable=True,
        )
    return AnalysisError(f"API error: {exc}", ErrorCode.API_ERROR, retryable=True)
