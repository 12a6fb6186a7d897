"""Endpoint adapters: request builders and response parsers."""

from nexmo_client.endpoints.base import AbstractEndpoint
from nexmo_client.endpoints.numbers import SearchNumbersEndpoint, ListNumbersEndpoint
from nexmo_client.endpoints.verify import (
    VerifyEndpoint,
    VerifyCheckEndpoint,
    VerifyControlEndpoint,
)

__all__ = [
    "AbstractEndpoint",
    "SearchNumbersEndpoint",
    "ListNumbersEndpoint",
    "VerifyEndpoint",
    "VerifyCheckEndpoint",
    "VerifyControlEndpoint",
]
