"""Shared call path for the API clients."""

import logging
from typing import Any

from pydantic import BaseModel

from nexmo_client.config.logging import (
    LoggingService,
    generate_correlation_id,
    set_correlation_id,
)
from nexmo_client.endpoints.base import AbstractEndpoint
from nexmo_client.exceptions import NexmoClientError, RequestThrottledError
from nexmo_client.models.schemas import StatusResult
from nexmo_client.transport.base import HttpTransport

logger = logging.getLogger(__name__)
logging_service = LoggingService(__name__)


class BaseApiClient:
    """Runs endpoint requests through a transport and logs the outcome."""

    def __init__(self, transport: HttpTransport):
        """Initialize client with transport dependency.

        Args:
            transport: HttpTransport implementation
        """
        self.transport = transport

    def _call(self, endpoint: AbstractEndpoint, params: Any, operation: str) -> BaseModel:
        """Build, send and parse one request.

        Args:
            endpoint: Endpoint adapter for the operation
            params: Parameters accepted by ``endpoint.make_request``
            operation: Operation name used in logs

        Returns:
            The parsed result model

        Raises:
            NexmoClientError: If the call is throttled, fails or cannot be parsed
        """
        set_correlation_id(generate_correlation_id())
        request = endpoint.make_request(params)

        try:
            response = self.transport.execute(request)
            result = endpoint.parse_response(response)

        except RequestThrottledError as e:
            logging_service.log_api_call(
                operation,
                request.url,
                success=False,
                error=str(e),
                status_code=429
            )
            raise
        except NexmoClientError as e:
            logging_service.log_error(
                "API call failed",
                e,
                endpoint=request.url,
                operation=operation
            )
            raise
        except Exception as e:
            logging_service.log_error(
                "Unexpected error during API call",
                e,
                endpoint=request.url,
                operation=operation
            )
            raise

        if isinstance(result, StatusResult) and not result.is_success:
            # Rejected verifications come back as HTTP 200 with a status code
            logging_service.log_api_call(
                operation,
                request.url,
                success=False,
                status=result.status,
                error_text=result.error_text
            )
        else:
            logging_service.log_api_call(
                operation,
                request.url,
                success=True,
                status_code=response.status_code
            )

        return result

    def _build(self, model: type, operation: str, **fields: Any) -> BaseModel:
        """Validate call arguments into a request model, logging rejects."""
        try:
            return model(**fields)
        except ValueError as e:
            logging_service.log_operation(
                "warning",
                f"Invalid arguments for {operation}",
                operation=operation,
                error=str(e)
            )
            raise
