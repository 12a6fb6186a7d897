"""Shared helpers for tests that stub the HTTP layer."""

import logging
from typing import Callable, List, Optional
from urllib.parse import parse_qsl

import httpx
import pytest

from nexmo_client.config.settings import Settings
from nexmo_client.transport.httpx_transport import HttpxTransport


REST_URL = "https://rest.example.test"
API_URL = "https://api.example.test"


def make_settings(**overrides) -> Settings:
    """Settings pointing at test hosts, independent of the environment."""
    values = {
        "api_key": "test-key",
        "api_secret": "test-secret",
        "rest_base_url": REST_URL,
        "api_base_url": API_URL,
    }
    values.update(overrides)
    return Settings(**values)


def stub_transport(status_code: int, body: str,
                   seen: Optional[List[httpx.Request]] = None,
                   settings: Optional[Settings] = None) -> HttpxTransport:
    """Transport answering every request with the same status and body."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, text=body)

    return handler_transport(handler, settings)


def handler_transport(handler: Callable[[httpx.Request], httpx.Response],
                      settings: Optional[Settings] = None) -> HttpxTransport:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return HttpxTransport(settings=settings or make_settings(), client=client)


def sent_params(request: httpx.Request) -> dict:
    """Parameters of a sent request, from its query string or form body."""
    if request.method == "GET":
        return dict(request.url.params)
    return dict(parse_qsl(request.content.decode("utf-8")))


class LogCapture:
    """Helper class to capture records logged under the nexmo_client logger."""

    def __init__(self):
        self.records = []
        self.handler = None
        self._logger = logging.getLogger("nexmo_client")
        self._level = None

    def __enter__(self):
        self.handler = logging.Handler()
        self.handler.emit = lambda record: self.records.append(record)

        self._level = self._logger.level
        self._logger.addHandler(self.handler)
        self._logger.setLevel(logging.DEBUG)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.handler:
            self._logger.removeHandler(self.handler)
        self._logger.setLevel(self._level)

    def get_log_records(self):
        return self.records


@pytest.fixture
def log_capture():
    with LogCapture() as capture:
        yield capture
