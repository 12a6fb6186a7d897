"""Endpoints of the verify API."""

from nexmo_client.endpoints.base import AbstractEndpoint
from nexmo_client.models.schemas import (
    ApiRequest,
    CheckRequest,
    CheckResult,
    ControlRequest,
    ControlResponse,
    VerifyRequest,
    VerifyResponse,
)

# VerifyRequest field -> request parameter, for optional fields
_VERIFY_OPTIONAL_PARAMS = (
    ("sender_id", "sender_id"),
    ("code_length", "code_length"),
    ("language", "lg"),
    ("country", "country"),
    ("pin_expiry", "pin_expiry"),
    ("next_event_wait", "next_event_wait"),
    ("workflow_id", "workflow_id"),
)


class VerifyEndpoint(AbstractEndpoint):
    """Start a verification of a number."""

    PATH = "/verify/json"
    BASE_URL_SETTING = "api_base_url"
    result_model = VerifyResponse

    def make_request(self, params: VerifyRequest) -> ApiRequest:
        form = {"number": params.number, "brand": params.brand}
        for field, name in _VERIFY_OPTIONAL_PARAMS:
            value = getattr(params, field)
            if value is not None:
                form[name] = str(value)

        return ApiRequest(method="POST", url=self.url, params=form)


class VerifyCheckEndpoint(AbstractEndpoint):
    """Check a code against a previously issued verification.

    The response ``status`` is required; a missing status fails parsing while
    an unreadable one degrades to a sentinel code. See ``CheckResult``.
    """

    PATH = "/verify/check/json"
    BASE_URL_SETTING = "api_base_url"
    result_model = CheckResult

    def make_request(self, params: CheckRequest) -> ApiRequest:
        form = {"request_id": params.request_id, "code": params.code}
        if params.ip_address is not None:
            form["ip_address"] = params.ip_address

        return ApiRequest(method="POST", url=self.url, params=form)


class VerifyControlEndpoint(AbstractEndpoint):
    """Cancel a verification or move it on to its next event."""

    PATH = "/verify/control/json"
    BASE_URL_SETTING = "api_base_url"
    result_model = ControlResponse

    def make_request(self, params: ControlRequest) -> ApiRequest:
        return ApiRequest(
            method="POST",
            url=self.url,
            params={"request_id": params.request_id, "cmd": params.command.value}
        )
