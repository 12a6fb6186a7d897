"""Data models for the client."""

from .schemas import (
    ApiRequest,
    SearchPattern,
    VerifyStatus,
    ControlCommand,
    ControlRequest,
    ListNumbersFilter,
    SearchNumbersFilter,
    AvailableNumber,
    SearchNumbersResponse,
    OwnedNumber,
    ListNumbersResponse,
    CheckRequest,
    CheckResult,
    VerifyRequest,
    VerifyResponse,
    ControlResponse,
)

__all__ = [
    "ApiRequest",
    "SearchPattern",
    "VerifyStatus",
    "ControlCommand",
    "ControlRequest",
    "ListNumbersFilter",
    "SearchNumbersFilter",
    "AvailableNumber",
    "SearchNumbersResponse",
    "OwnedNumber",
    "ListNumbersResponse",
    "CheckRequest",
    "CheckResult",
    "VerifyRequest",
    "VerifyResponse",
    "ControlResponse",
]
