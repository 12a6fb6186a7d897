"""Tests for the numbers endpoints: request building and response parsing."""

import httpx
import pytest
from decimal import Decimal
from hypothesis import given, strategies as st

from nexmo_client.endpoints.numbers import ListNumbersEndpoint, SearchNumbersEndpoint
from nexmo_client.exceptions import ApiError, RequestThrottledError, ResponseParseError
from nexmo_client.models.schemas import (
    ListNumbersFilter,
    SearchNumbersFilter,
    SearchNumbersResponse,
    SearchPattern,
)

from conftest import REST_URL


SEARCH_JSON = """{
  "count": 4,
  "numbers": [
    {
      "country": "GB",
      "msisdn": "447700900000",
      "cost": "0.50",
      "type": "mobile",
      "features": [
        "VOICE",
        "SMS"
      ]
    }
  ]
}"""


# Generator for feature names
feature_strategy = st.text(
    alphabet=st.characters(whitelist_categories=('Lu', 'Nd')),
    min_size=1,
    max_size=8
)


class TestSearchNumbersRequest:
    """Building search requests from filters."""

    @pytest.fixture
    def endpoint(self):
        return SearchNumbersEndpoint(REST_URL)

    def test_make_request(self, endpoint):
        search_filter = SearchNumbersFilter(
            country="BB",
            index=10,
            size=20,
            pattern="234",
            features=["SMS", "VOICE"],
            search_pattern=SearchPattern.STARTS_WITH
        )

        request = endpoint.make_request(search_filter)

        assert request.method == "GET"
        assert request.url == f"{REST_URL}/number/search"
        assert request.params["country"] == "BB"
        assert request.params["features"] == "SMS,VOICE"
        assert request.params["pattern"] == "234"
        assert request.params["search_pattern"] == "0"
        assert request.params["index"] == "10"
        assert request.params["size"] == "20"

    def test_null_feature_param(self, endpoint):
        request = endpoint.make_request(SearchNumbersFilter(country="BB"))

        assert request.params["country"] == "BB"
        assert "features" not in request.params

    def test_empty_feature(self, endpoint):
        request = endpoint.make_request(SearchNumbersFilter(country="BB", features=[]))

        assert request.params["country"] == "BB"
        assert "features" not in request.params

    def test_country_only_sends_country_only(self, endpoint):
        request = endpoint.make_request(SearchNumbersFilter(country="gb"))

        assert request.params == {"country": "GB"}

    @pytest.mark.parametrize("mode,code", [
        (SearchPattern.STARTS_WITH, "0"),
        (SearchPattern.ANYWHERE, "1"),
        (SearchPattern.ENDS_WITH, "2"),
    ])
    def test_search_pattern_sent_as_integer_code(self, endpoint, mode, code):
        request = endpoint.make_request(
            SearchNumbersFilter(country="US", pattern="555", search_pattern=mode)
        )

        assert request.params["search_pattern"] == code

    def test_number_type(self, endpoint):
        request = endpoint.make_request(
            SearchNumbersFilter(country="US", number_type="mobile-lvn")
        )

        assert request.params["type"] == "mobile-lvn"

    def test_base_url_trailing_slash_is_dropped(self):
        endpoint = SearchNumbersEndpoint(REST_URL + "/")

        assert endpoint.url == f"{REST_URL}/number/search"


@given(st.one_of(st.none(), st.just([]), st.just(()), st.just("")))
def test_unset_features_never_sent(features):
    """An absent or empty feature set produces no features parameter."""
    request = SearchNumbersEndpoint(REST_URL).make_request(
        SearchNumbersFilter(country="BB", features=features)
    )

    assert "features" not in request.params


@given(st.lists(feature_strategy, min_size=1, max_size=5, unique=True))
def test_features_joined_in_order(features):
    """A non-empty feature set is sent comma-joined in insertion order."""
    request = SearchNumbersEndpoint(REST_URL).make_request(
        SearchNumbersFilter(country="BB", features=features)
    )

    assert request.params["features"] == ",".join(features)


class TestSearchNumbersResponse:
    """Parsing search responses."""

    @pytest.fixture
    def endpoint(self):
        return SearchNumbersEndpoint(REST_URL)

    def test_parse_response(self, endpoint):
        response = endpoint.parse_response(httpx.Response(200, text=SEARCH_JSON))

        assert isinstance(response, SearchNumbersResponse)
        assert response.count == 4
        assert len(response.numbers) == 1

        number = response.numbers[0]
        assert number.country == "GB"
        assert number.msisdn == "447700900000"
        assert number.cost == Decimal("0.50")
        assert number.type == "mobile"
        assert number.features == ["VOICE", "SMS"]

    def test_parse_response_without_numbers(self, endpoint):
        response = endpoint.parse_response(httpx.Response(200, text='{"count": 0}'))

        assert response.count == 0
        assert response.numbers == []

    def test_request_throttle_response(self, endpoint):
        with pytest.raises(RequestThrottledError):
            endpoint.parse_response(httpx.Response(429, text=SEARCH_JSON))

    @pytest.mark.parametrize("body", [
        "",
        "not json",
        "[1, 2, 3]",
        '{"numbers": []}',
        '{"count": "many"}',
        '{"count": 1, "numbers": [{"country": "GB"}]}',
    ])
    def test_malformed_response(self, endpoint, body):
        with pytest.raises(ResponseParseError):
            endpoint.parse_response(httpx.Response(200, text=body))

    def test_error_status(self, endpoint):
        body = '{"error-code": "401", "error-code-label": "authentication failed"}'

        with pytest.raises(ApiError) as exc_info:
            endpoint.parse_response(httpx.Response(401, text=body))

        assert exc_info.value.status_code == 401
        assert exc_info.value.body == body


@given(st.text(max_size=200))
def test_throttled_regardless_of_body(body):
    """HTTP 429 is a throttling error whatever the body holds."""
    with pytest.raises(RequestThrottledError):
        SearchNumbersEndpoint(REST_URL).parse_response(httpx.Response(429, text=body))


class TestListNumbersEndpoint:
    """Listing owned numbers."""

    @pytest.fixture
    def endpoint(self):
        return ListNumbersEndpoint(REST_URL)

    def test_make_request(self, endpoint):
        request = endpoint.make_request(
            ListNumbersFilter(pattern="447", search_pattern=SearchPattern.ANYWHERE, size=50)
        )

        assert request.method == "GET"
        assert request.url == f"{REST_URL}/account/numbers"
        assert request.params == {"pattern": "447", "search_pattern": "1", "size": "50"}

    def test_make_request_without_criteria(self, endpoint):
        assert endpoint.make_request(ListNumbersFilter()).params == {}

    def test_parse_response(self, endpoint):
        body = """{
          "count": 1,
          "numbers": [{
            "country": "GB",
            "msisdn": "447700900001",
            "moHttpUrl": "https://example.com/mo",
            "type": "mobile-lvn",
            "features": ["VOICE", "SMS"],
            "voiceCallbackType": "app",
            "voiceCallbackValue": "aaaaaaaa-bbbb-cccc-dddd-0123456789ab"
          }]
        }"""

        response = endpoint.parse_response(httpx.Response(200, text=body))

        assert response.count == 1
        owned = response.numbers[0]
        assert owned.msisdn == "447700900001"
        assert owned.mo_http_url == "https://example.com/mo"
        assert owned.voice_callback_type == "app"

    def test_request_throttle_response(self, endpoint):
        with pytest.raises(RequestThrottledError):
            endpoint.parse_response(httpx.Response(429))
