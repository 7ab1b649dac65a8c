"""Exception hierarchy for the NewsAPI client and CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from newsapi_client.data.enums import ErrorCode


class NewsAPIError(Exception):
    """Base exception for all client errors."""


class ConfigurationError(NewsAPIError):
    """Raised when the API key or client configuration is missing or invalid."""


class ValidationError(NewsAPIError, ValueError):
    """Raised when user input (enum value, date, option, required field) is invalid."""


class TransportError(NewsAPIError):
    """Raised on connection failure or a non-success HTTP status."""


class ResponseError(NewsAPIError):
    """Raised when a response body is not JSON or does not match the expected shape."""


class UpstreamError(NewsAPIError):
    """Raised when the API answers with a well-formed error response.

    Args:
        code: Error code reported by the API (e.g. "apiKeyInvalid").
        message: Human-readable message reported by the API.
        status_code: HTTP status of the response, if known.
    """

    def __init__(self, code: str, message: str, *, status_code: int | None = None) -> None:
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message
        self.status_code = status_code

    @property
    def error_code(self) -> ErrorCode | None:
        """The code as an ``ErrorCode``, or None if the API sent an undocumented one."""
        from newsapi_client.data.enums import ErrorCode

        try:
            return ErrorCode(self.code)
        except ValueError:
            return None
