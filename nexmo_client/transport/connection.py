"""HTTP connection management for the API client."""

import logging
import threading
from typing import Optional

import httpx

from nexmo_client.config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class HttpClientManager:
    """Owns a pooled httpx.Client created on first use."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or default_settings
        self._client: Optional[httpx.Client] = None
        self._is_connected = False
        self._lock = threading.RLock()

    def initialize(self) -> None:
        """Create the pooled HTTP client."""
        try:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self._settings.http_timeout),
                limits=httpx.Limits(max_connections=self._settings.http_max_connections),
                headers={
                    "User-Agent": self._settings.user_agent,
                    "Accept": "application/json",
                },
            )
            self._is_connected = True

            logger.info(
                "HTTP client initialized",
                extra={
                    "timeout": self._settings.http_timeout,
                    "max_connections": self._settings.http_max_connections
                }
            )

        except Exception as e:
            logger.error(
                "Failed to initialize HTTP client",
                extra={"error": str(e)}
            )
            raise

    def get_client(self) -> httpx.Client:
        """Get the HTTP client, creating it if needed."""
        client = self._client
        if client is not None and self._is_connected:
            return client

        with self._lock:
            if self._client is None or not self._is_connected:
                self.initialize()

            return self._client

    def close(self) -> None:
        """Close the HTTP client and its connection pool."""
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None

            self._is_connected = False
        logger.info("HTTP client closed")

    @property
    def is_connected(self) -> bool:
        """Check if a client is open."""
        return self._is_connected

    def reconnect(self) -> None:
        """Recreate the HTTP client."""
        logger.info("Recreating HTTP client")
        with self._lock:
            self.close()
            self.initialize()


# Global connection manager instance
http_manager = HttpClientManager()
