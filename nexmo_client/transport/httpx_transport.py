"""httpx implementation of HttpTransport."""

import logging
from typing import Dict, Optional

import httpx

from nexmo_client.config.settings import Settings, settings as default_settings
from nexmo_client.exceptions import TransportError
from nexmo_client.models.schemas import ApiRequest
from nexmo_client.transport.base import HttpTransport
from nexmo_client.transport.connection import HttpClientManager, http_manager

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransport):
    """Transport sending requests through a pooled httpx.Client.

    GET parameters go in the query string, POST parameters in a form body.
    Account credentials from settings are added to every request unless the
    request already carries them.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.Client] = None,
        manager: Optional[HttpClientManager] = None,
    ):
        self._settings = settings or default_settings
        self._client = client
        if manager is None:
            manager = http_manager if settings is None else HttpClientManager(self._settings)
        self._manager = manager

    def _get_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return self._manager.get_client()

    def _with_credentials(self, params: Dict[str, str]) -> Dict[str, str]:
        merged = {}
        if self._settings.api_key:
            merged["api_key"] = self._settings.api_key
        if self._settings.api_secret:
            merged["api_secret"] = self._settings.api_secret
        merged.update(params)
        return merged

    def execute(self, request: ApiRequest) -> httpx.Response:
        """Send the request and return the raw response."""
        params = self._with_credentials(request.params)
        client = self._get_client()

        try:
            if request.method == "GET":
                response = client.get(request.url, params=params)
            else:
                response = client.post(request.url, data=params)

        except httpx.TimeoutException as e:
            logger.error(
                "Timeout calling API",
                extra={"endpoint": request.url, "error": str(e), "operation": "execute"}
            )
            raise TransportError(f"Request to {request.url} timed out") from e

        except httpx.TransportError as e:
            logger.error(
                "Connection error calling API",
                extra={"endpoint": request.url, "error": str(e), "operation": "execute"}
            )
            raise TransportError("API service unavailable") from e

        logger.debug(
            "API response received",
            extra={
                "endpoint": request.url,
                "method": request.method,
                "status_code": response.status_code,
                "operation": "execute"
            }
        )

        return response

    def close(self) -> None:
        """Close pooled connections; an injected client is left to its owner."""
        if self._client is None:
            self._manager.close()
