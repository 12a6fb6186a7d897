"""Client for the verify API."""

from typing import Any, Optional

from nexmo_client.endpoints.verify import (
    VerifyCheckEndpoint,
    VerifyControlEndpoint,
    VerifyEndpoint,
)
from nexmo_client.models.schemas import (
    CheckRequest,
    CheckResult,
    ControlCommand,
    ControlRequest,
    ControlResponse,
    VerifyRequest,
    VerifyResponse,
)
from nexmo_client.services.base import BaseApiClient
from nexmo_client.transport.base import HttpTransport


class VerifyClient(BaseApiClient):
    """Two-factor verification: start, check and control verifications.

    A verification the API rejects is not an exception: the returned result
    carries the status code and ``error_text``.
    """

    def __init__(self, transport: HttpTransport, base_url: Optional[str] = None):
        super().__init__(transport)
        self.verify_endpoint = VerifyEndpoint(base_url)
        self.check_endpoint = VerifyCheckEndpoint(base_url)
        self.control_endpoint = VerifyControlEndpoint(base_url)

    def verify(self, number: str, brand: str, **options: Any) -> VerifyResponse:
        """Start a verification of ``number``.

        Args:
            number: Number to verify, international format
            brand: Name shown in the verification message
            **options: sender_id, code_length, language, country, pin_expiry,
                next_event_wait, workflow_id

        Returns:
            VerifyResponse holding the request_id to check codes against
        """
        request = self._build(VerifyRequest, "verify", number=number, brand=brand, **options)
        return self._call(self.verify_endpoint, request, "verify")

    def check(self, request_id: str, code: str, ip_address: Optional[str] = None) -> CheckResult:
        """Check a code the user entered.

        Args:
            request_id: Identifier returned when the verification started
            code: Code entered by the user
            ip_address: IP address of the user, if known

        Returns:
            CheckResult with status, event id and price

        Raises:
            ResponseParseError: If the response has no status or an unreadable price
            RequestThrottledError: If the API answered HTTP 429
        """
        request = self._build(
            CheckRequest,
            "check",
            request_id=request_id,
            code=code,
            ip_address=ip_address
        )
        return self._call(self.check_endpoint, request, "check")

    def cancel(self, request_id: str) -> ControlResponse:
        """Cancel an in-flight verification."""
        return self._control(request_id, ControlCommand.CANCEL)

    def advance(self, request_id: str) -> ControlResponse:
        """Skip to the next event of an in-flight verification."""
        return self._control(request_id, ControlCommand.TRIGGER_NEXT_EVENT)

    def _control(self, request_id: str, command: ControlCommand) -> ControlResponse:
        request = self._build(
            ControlRequest,
            "control",
            request_id=request_id,
            command=command
        )
        return self._call(self.control_endpoint, request, command.value)
