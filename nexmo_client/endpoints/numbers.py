"""Endpoints of the numbers API."""

from typing import Dict

from nexmo_client.endpoints.base import AbstractEndpoint
from nexmo_client.models.schemas import (
    ApiRequest,
    ListNumbersFilter,
    ListNumbersResponse,
    SearchNumbersFilter,
    SearchNumbersResponse,
)


def _paging_params(numbers_filter: ListNumbersFilter) -> Dict[str, str]:
    """Parameters shared by search and list; unset fields are left out."""
    params = {}
    if numbers_filter.pattern is not None:
        params["pattern"] = numbers_filter.pattern
    if numbers_filter.search_pattern is not None:
        params["search_pattern"] = str(numbers_filter.search_pattern.value)
    if numbers_filter.index is not None:
        params["index"] = str(numbers_filter.index)
    if numbers_filter.size is not None:
        params["size"] = str(numbers_filter.size)
    return params


class SearchNumbersEndpoint(AbstractEndpoint):
    """Search numbers available for purchase."""

    PATH = "/number/search"
    BASE_URL_SETTING = "rest_base_url"
    result_model = SearchNumbersResponse

    def make_request(self, params: SearchNumbersFilter) -> ApiRequest:
        query = {"country": params.country}
        query.update(_paging_params(params))
        # An empty feature set is sent as no parameter at all
        if params.features:
            query["features"] = ",".join(params.features)
        if params.number_type is not None:
            query["type"] = params.number_type

        return ApiRequest(method="GET", url=self.url, params=query)


class ListNumbersEndpoint(AbstractEndpoint):
    """List the numbers owned by the account."""

    PATH = "/account/numbers"
    BASE_URL_SETTING = "rest_base_url"
    result_model = ListNumbersResponse

    def make_request(self, params: ListNumbersFilter) -> ApiRequest:
        return ApiRequest(method="GET", url=self.url, params=_paging_params(params))
