"""Entry point wiring the API clients to a transport."""

from typing import Optional

from nexmo_client.config.settings import Settings, settings as default_settings
from nexmo_client.services.numbers_client import NumbersClient
from nexmo_client.services.verify_client import VerifyClient
from nexmo_client.transport.base import HttpTransport
from nexmo_client.transport.httpx_transport import HttpxTransport


class NexmoClient:
    """Client for the numbers and verify APIs.

    Example:
        >>> with NexmoClient() as client:
        ...     result = client.numbers.search_numbers("GB", features=["SMS"])
        ...     result.count
        4
    """

    def __init__(self, settings: Optional[Settings] = None,
                 transport: Optional[HttpTransport] = None):
        self.settings = settings or default_settings
        self.transport = transport or HttpxTransport(settings)
        self.numbers = NumbersClient(self.transport, self.settings.rest_base_url)
        self.verify = VerifyClient(self.transport, self.settings.api_base_url)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "NexmoClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
