"""Exceptions raised by the client."""

from typing import Optional


class NexmoClientError(Exception):
    """Base class for all client errors."""


class ResponseParseError(NexmoClientError):
    """Raised when a response body cannot be mapped to a result."""


class RequestThrottledError(NexmoClientError):
    """Raised when the API rejects a request with HTTP 429."""


class ApiError(NexmoClientError):
    """Raised for HTTP error statuses other than 429."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned HTTP {status_code}")


class TransportError(NexmoClientError, ConnectionError):
    """Raised when the API cannot be reached."""
