"""Transport layer for sending API requests."""

from nexmo_client.transport.base import HttpTransport
from nexmo_client.transport.httpx_transport import HttpxTransport
from nexmo_client.transport.connection import http_manager, HttpClientManager

__all__ = [
    "HttpTransport",
    "HttpxTransport",
    "HttpClientManager",
    "http_manager"
]
