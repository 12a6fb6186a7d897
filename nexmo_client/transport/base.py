"""Abstract transport interface for executing API requests."""

from abc import ABC, abstractmethod

import httpx

from nexmo_client.models.schemas import ApiRequest


class HttpTransport(ABC):
    """Abstract transport that sends request descriptors over HTTP."""

    @abstractmethod
    def execute(self, request: ApiRequest) -> httpx.Response:
        """Send a request and return the raw response.

        Args:
            request: ApiRequest built by an endpoint

        Returns:
            The HTTP response, whatever its status code

        Raises:
            TransportError: If the API cannot be reached
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release any connections held by the transport."""
        pass
