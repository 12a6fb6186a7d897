"""API clients built on the endpoint adapters."""

from nexmo_client.services.base import BaseApiClient
from nexmo_client.services.numbers_client import NumbersClient
from nexmo_client.services.verify_client import VerifyClient
from nexmo_client.services.client import NexmoClient

__all__ = [
    "BaseApiClient",
    "NumbersClient",
    "VerifyClient",
    "NexmoClient",
]
