"""Errors surfaced by nutrition analysis."""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Kinds of analysis failures."""

    EMPTY_INPUT = "EMPTY_INPUT"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    PARSE_ERROR = "PARSE_ERROR"
    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    RATE_LIMIT = "RATE_LIMIT"
    SERVER_ERROR = "SERVER_ERROR"
    API_ERROR = "API_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class AnalysisError(Exception):
    """Analysis failure with a code and a retry hint for callers."""

    def __init__(self, message: str, code: ErrorCode, *, retryable: bool) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.retryable = retryable

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-friendly dict."""
        return {
            "message": self.message,
            "code": str(self.code),
            "retryable": self.retryable,
        }
