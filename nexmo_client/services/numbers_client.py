"""Client for the numbers API."""

from typing import Any, Optional, Union

from nexmo_client.endpoints.numbers import ListNumbersEndpoint, SearchNumbersEndpoint
from nexmo_client.models.schemas import (
    ListNumbersFilter,
    ListNumbersResponse,
    SearchNumbersFilter,
    SearchNumbersResponse,
)
from nexmo_client.services.base import BaseApiClient
from nexmo_client.transport.base import HttpTransport


class NumbersClient(BaseApiClient):
    """Search for available numbers and list the account's numbers."""

    def __init__(self, transport: HttpTransport, base_url: Optional[str] = None):
        super().__init__(transport)
        self.search_endpoint = SearchNumbersEndpoint(base_url)
        self.list_endpoint = ListNumbersEndpoint(base_url)

    def search_numbers(self, search_filter: Union[str, SearchNumbersFilter],
                       **criteria: Any) -> SearchNumbersResponse:
        """Search numbers available for purchase.

        Args:
            search_filter: A SearchNumbersFilter, or a country code in which
                case ``criteria`` supplies the remaining filter fields
            **criteria: pattern, search_pattern, features, number_type, index, size

        Returns:
            SearchNumbersResponse with the total count and one page of numbers

        Raises:
            TypeError: If criteria are given along with a SearchNumbersFilter
            ValueError: If the filter is invalid
            NexmoClientError: If the request fails or the response is malformed
        """
        if isinstance(search_filter, SearchNumbersFilter):
            if criteria:
                raise TypeError(
                    f"Unexpected criteria with a SearchNumbersFilter: {', '.join(sorted(criteria))}"
                )
        else:
            search_filter = self._build(
                SearchNumbersFilter,
                "search_numbers",
                country=search_filter,
                **criteria
            )

        return self._call(self.search_endpoint, search_filter, "search_numbers")

    def list_numbers(self, list_filter: Optional[ListNumbersFilter] = None,
                     **criteria: Any) -> ListNumbersResponse:
        """List numbers owned by the account.

        Args:
            list_filter: Optional ListNumbersFilter; built from ``criteria`` when omitted
            **criteria: pattern, search_pattern, index, size

        Returns:
            ListNumbersResponse with the total count and one page of numbers
        """
        if list_filter is None:
            list_filter = self._build(ListNumbersFilter, "list_numbers", **criteria)
        elif criteria:
            raise TypeError(
                f"Unexpected criteria with a ListNumbersFilter: {', '.join(sorted(criteria))}"
            )

        return self._call(self.list_endpoint, list_filter, "list_numbers")
