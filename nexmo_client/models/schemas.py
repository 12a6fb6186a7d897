"""Pydantic models for the numbers and verify APIs."""

from decimal import Decimal
from enum import Enum, IntEnum
from typing import Any, Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
import re


PHONE_PATTERN = r'^\+?[1-9]\d{1,14}$'
INTEGER_PATTERN = r'[+-]?[0-9]+'


class SearchPattern(IntEnum):
    """Where a number pattern must match; sent as its integer code."""

    STARTS_WITH = 0
    ANYWHERE = 1
    ENDS_WITH = 2


class VerifyStatus(IntEnum):
    """Status codes returned by the verify endpoints."""

    OK = 0
    THROTTLED = 1
    MISSING_PARAMS = 2
    INVALID_PARAMS = 3
    INVALID_CREDENTIALS = 4
    INTERNAL_ERROR = 5
    INVALID_REQUEST = 6
    NUMBER_BARRED = 7
    PARTNER_ACCOUNT_BARRED = 8
    PARTNER_QUOTA_EXCEEDED = 9
    ALREADY_REQUESTED = 10
    UNSUPPORTED_NETWORK = 15
    INVALID_CODE = 16
    WRONG_CODE_THROTTLED = 17
    TOO_MANY_DESTINATIONS = 18
    NO_MORE_EVENTS = 19
    NO_RESPONSE = 101
    UNKNOWN = 2147483647


class ControlCommand(str, Enum):
    """Commands accepted by the verify control endpoint."""

    CANCEL = "cancel"
    TRIGGER_NEXT_EVENT = "trigger_next_event"


def coerce_verify_status(value: Any) -> int:
    """Map a raw status value to a status code.

    Integer-looking values that are not a known status map to
    ``VerifyStatus.UNKNOWN``; anything else maps to
    ``VerifyStatus.INTERNAL_ERROR``.
    """
    if isinstance(value, bool):
        return VerifyStatus.INTERNAL_ERROR.value
    if isinstance(value, int):
        code = value
    elif isinstance(value, str):
        text = value.strip()
        if not re.fullmatch(INTEGER_PATTERN, text):
            return VerifyStatus.INTERNAL_ERROR.value
        try:
            code = int(text)
        except ValueError:
            # Beyond the interpreter's integer string limit
            return VerifyStatus.UNKNOWN.value
    else:
        return VerifyStatus.INTERNAL_ERROR.value

    try:
        return VerifyStatus(code).value
    except ValueError:
        return VerifyStatus.UNKNOWN.value


class ApiRequest(BaseModel):
    """Outbound request descriptor produced by an endpoint."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST"]
    url: str
    params: Dict[str, str] = Field(default_factory=dict)


class ListNumbersFilter(BaseModel):
    """Filter for listing the numbers owned by the account."""

    model_config = ConfigDict(frozen=True)

    pattern: Optional[str] = Field(
        default=None,
        description="Digits the number must contain",
        min_length=1
    )
    search_pattern: Optional[SearchPattern] = Field(
        default=None,
        description="Where the pattern must match"
    )
    index: Optional[int] = Field(default=None, description="Page index, 1-based", ge=1)
    size: Optional[int] = Field(default=None, description="Page size", ge=1, le=100)

    @field_validator('pattern')
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Pattern is a run of digits."""
        if v is None:
            return v
        pattern = v.strip()
        if not pattern.isdigit():
            raise ValueError('Pattern must contain digits only')
        return pattern


class SearchNumbersFilter(ListNumbersFilter):
    """Filter for searching numbers available for purchase."""

    country: str = Field(
        ...,
        description="Two-letter country code",
        min_length=2,
        max_length=2
    )
    features: Tuple[str, ...] = Field(
        default=(),
        description="Capabilities the number must support, e.g. SMS, VOICE"
    )
    number_type: Optional[str] = Field(
        default=None,
        description="Number type, e.g. landline or mobile-lvn"
    )

    @field_validator('country')
    @classmethod
    def validate_country(cls, v: str) -> str:
        """Country is two ASCII letters, upper-cased."""
        country = v.strip()
        if not re.match(r'^[A-Za-z]{2}$', country):
            raise ValueError('Country must be a two-letter country code')
        return country.upper()

    @field_validator('features', mode='before')
    @classmethod
    def split_features(cls, v: Any) -> Tuple[str, ...]:
        """Accept a comma separated string or any iterable; drop blanks and repeats."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(',')
        features = [item.strip() for item in v if item and item.strip()]
        return tuple(dict.fromkeys(features))


class AvailableNumber(BaseModel):
    """A number returned by the search endpoint."""

    country: str
    msisdn: str
    cost: Optional[Decimal] = None
    type: Optional[str] = None
    features: List[str] = Field(default_factory=list)


class SearchNumbersResponse(BaseModel):
    """Result of a number search."""

    model_config = ConfigDict(frozen=True)

    count: int
    numbers: List[AvailableNumber] = Field(default_factory=list)

    @field_validator('numbers', mode='before')
    @classmethod
    def default_numbers(cls, v: Any) -> Any:
        return [] if v is None else v


class OwnedNumber(BaseModel):
    """A number owned by the account."""

    model_config = ConfigDict(populate_by_name=True)

    country: str
    msisdn: str
    type: Optional[str] = None
    features: List[str] = Field(default_factory=list)
    mo_http_url: Optional[str] = Field(default=None, alias="moHttpUrl")
    voice_callback_type: Optional[str] = Field(default=None, alias="voiceCallbackType")
    voice_callback_value: Optional[str] = Field(default=None, alias="voiceCallbackValue")


class ListNumbersResponse(BaseModel):
    """Result of listing owned numbers."""

    model_config = ConfigDict(frozen=True)

    count: int
    numbers: List[OwnedNumber] = Field(default_factory=list)

    @field_validator('numbers', mode='before')
    @classmethod
    def default_numbers(cls, v: Any) -> Any:
        return [] if v is None else v


class CheckRequest(BaseModel):
    """Parameters for checking a verification code."""

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(..., description="Identifier of the verification", min_length=1)
    code: str = Field(..., description="Code entered by the user", min_length=1)
    ip_address: Optional[str] = Field(default=None, description="IP address of the user")


class VerifyRequest(BaseModel):
    """Parameters for starting a verification."""

    model_config = ConfigDict(frozen=True)

    number: str = Field(..., description="Number to verify, international format")
    brand: str = Field(..., description="Name shown in the message", min_length=1, max_length=18)
    sender_id: Optional[str] = Field(default=None, min_length=1, max_length=11)
    code_length: Optional[int] = None
    language: Optional[str] = Field(default=None, description="Locale such as en-gb")
    country: Optional[str] = Field(default=None, min_length=2, max_length=2)
    pin_expiry: Optional[int] = Field(default=None, ge=60, le=3600)
    next_event_wait: Optional[int] = Field(default=None, ge=60, le=900)
    workflow_id: Optional[int] = Field(default=None, ge=1, le=5)

    @field_validator('number')
    @classmethod
    def validate_number(cls, v: str) -> str:
        """Validate number format using E.164 standard."""
        number = v.strip()
        if not re.match(PHONE_PATTERN, number):
            raise ValueError(
                'Number must be in E.164 format: optional + followed by 2-15 digits, '
                'starting with a non-zero digit'
            )
        return number.lstrip('+')

    @field_validator('code_length')
    @classmethod
    def validate_code_length(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v not in (4, 6):
            raise ValueError('Code length must be 4 or 6')
        return v

    @field_validator('language')
    @classmethod
    def validate_language(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        language = v.strip().lower()
        if not re.match(r'^[a-z]{2}-[a-z]{2}$', language):
            raise ValueError('Language must be a locale such as en-gb')
        return language

    @field_validator('country')
    @classmethod
    def validate_country(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not v.isalpha():
            raise ValueError('Country must be a two-letter country code')
        return v.upper()


class ControlRequest(BaseModel):
    """Command to apply to an in-flight verification."""

    model_config = ConfigDict(frozen=True)

    request_id: str = Field(..., min_length=1)
    command: ControlCommand


class StatusResult(BaseModel):
    """Base for verify results carrying a status code."""

    model_config = ConfigDict(frozen=True)

    status: int = Field(..., description="Status code; required in the response")
    error_text: Optional[str] = None

    @field_validator('status', mode='before')
    @classmethod
    def coerce_status(cls, v: Any) -> int:
        """A null status counts as absent."""
        if v is None:
            raise ValueError('Status is required')
        return coerce_verify_status(v)

    @property
    def verify_status(self) -> VerifyStatus:
        """Status as a VerifyStatus member."""
        return VerifyStatus(self.status)

    @property
    def is_success(self) -> bool:
        return self.status == VerifyStatus.OK


class CheckResult(StatusResult):
    """Result of checking a verification code."""

    request_id: Optional[str] = None
    event_id: Optional[str] = None
    price: Decimal = Field(default=Decimal("0"), description="Cost of the verification")
    currency: Optional[str] = None

    @field_validator('price', mode='before')
    @classmethod
    def default_price(cls, v: Any) -> Any:
        """A null price counts as absent."""
        return Decimal("0") if v is None else v


class VerifyResponse(StatusResult):
    """Result of starting a verification."""

    request_id: Optional[str] = None


class ControlResponse(StatusResult):
    """Result of a verify control command."""

    command: Optional[str] = None
