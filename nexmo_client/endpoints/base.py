"""Base class for endpoint adapters."""

import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from nexmo_client.config.settings import settings
from nexmo_client.exceptions import ApiError, RequestThrottledError, ResponseParseError
from nexmo_client.models.schemas import ApiRequest

logger = logging.getLogger(__name__)


class AbstractEndpoint(ABC):
    """Builds requests for one API path and parses its responses.

    Endpoints hold no state besides their URL, so one instance can be shared
    between threads.
    """

    PATH: str = ""
    BASE_URL_SETTING: str = "rest_base_url"
    result_model: Type[BaseModel]

    def __init__(self, base_url: Optional[str] = None):
        if base_url is None:
            base_url = getattr(settings, self.BASE_URL_SETTING)
        self.base_url = base_url.rstrip('/')

    @property
    def url(self) -> str:
        return f"{self.base_url}{self.PATH}"

    @abstractmethod
    def make_request(self, params: Any) -> ApiRequest:
        """Build the outbound request for the given parameters."""
        pass

    def parse_response(self, response: httpx.Response) -> BaseModel:
        """Map an HTTP response to the endpoint's result model.

        Raises:
            RequestThrottledError: On HTTP 429, whatever the body
            ApiError: On any other HTTP error status
            ResponseParseError: If the body is not a JSON object of the expected shape
        """
        if response.status_code == 429:
            logger.warning(
                "Request throttled by API",
                extra={"endpoint": self.url, "status_code": 429}
            )
            raise RequestThrottledError(f"Request to {self.url} was throttled")

        if response.status_code >= 400:
            logger.error(
                "API returned an error status",
                extra={"endpoint": self.url, "status_code": response.status_code}
            )
            raise ApiError(response.status_code, response.text)

        try:
            data = json.loads(response.text)
        except json.JSONDecodeError as e:
            logger.error(
                "Failed to parse response JSON",
                extra={"endpoint": self.url, "error": str(e)}
            )
            raise ResponseParseError("Response body is not valid JSON") from e

        if not isinstance(data, dict):
            raise ResponseParseError("Response body is not a JSON object")

        try:
            return self.result_model.model_validate(data)
        except ValidationError as e:
            logger.error(
                "Response does not match expected shape",
                extra={"endpoint": self.url, "error": str(e)}
            )
            raise ResponseParseError(
                f"Failed to parse {self.result_model.__name__}: {e}"
            ) from e
