"""Client for the Nexmo numbers and verify REST APIs."""

from nexmo_client.services import NexmoClient, NumbersClient, VerifyClient
from nexmo_client.exceptions import (
    NexmoClientError,
    ResponseParseError,
    RequestThrottledError,
    ApiError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "NexmoClient",
    "NumbersClient",
    "VerifyClient",
    "NexmoClientError",
    "ResponseParseError",
    "RequestThrottledError",
    "ApiError",
    "TransportError",
]
