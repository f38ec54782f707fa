"""Page-by-page retrieval of list endpoints.

History endpoints return one page at a time through ``page``/``page_size``.
A page shorter than ``page_size`` marks the end of the data.

Known limitation: after the fetch of page ``MAX_PAGE_INDEX`` the loop stops
even if that page was full, so very large result sets are truncated. This is
logged but not reported to the caller.
"""

import logging
from typing import AsyncIterator, Awaitable, Callable, TypeAlias

from cryptocom_exchange.errors import DeserializationError
from cryptocom_exchange.types import JsonValue, ParamMap

log = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 200
# pages 0..MAX_PAGE_INDEX are fetched at most, i.e. 101 requests
MAX_PAGE_INDEX = 100

# (method, params, is_public) -> result
RequestSender: TypeAlias = Callable[[str, ParamMap, bool], Awaitable[JsonValue]]


async def paginate_all(
    send: RequestSender,
    method: str,
    base_params: ParamMap | None,
    result_key: str,
    is_public: bool = False,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> AsyncIterator[JsonValue]:
    """Yield every item of a paginated endpoint, in page order.

    Pages are requested lazily, one at a time; the generator cannot be rewound,
    call this function again to start over. An error on any page, cancellation
    included, ends the iteration without requesting further pages.

    Args:
        send: Coroutine issuing one call, typically ``CryptoComApiClient.request``
        method: The API method to page through
        base_params: Parameters sent with every page
        result_key: Key of the item list inside each result
        is_public: Whether the endpoint is public
        page_size: Items requested per page

    Yields:
        The items of each page in the order the exchange returned them

    Raises:
        DeserializationError: If ``result[result_key]`` is present but not a list

    """
    page = 0
    while True:
        params: ParamMap = {**(base_params or {}), "page": page, "page_size": page_size}
        result = await send(method, params, is_public)

        items = result.get(result_key) if isinstance(result, dict) else None
        if items is None:
            items = []
        if not isinstance(items, list):
            raise DeserializationError(
                f"Expected a list under {result_key!r} in {method} page {page}"
            )

        for item in items:
            yield item

        if len(items) < page_size:
            return

        if page >= MAX_PAGE_INDEX:
            log.warning(
                "Stopped paging %s after %d full pages, remaining items were not fetched",
                method,
                page + 1,
            )
            return

        page += 1


async def collect_all(
    send: RequestSender,
    method: str,
    base_params: ParamMap | None,
    result_key: str,
    is_public: bool = False,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[JsonValue]:
    """Gather every item of a paginated endpoint into a list."""
    return [
        item
        async for item in paginate_all(
            send, method, base_params, result_key, is_public, page_size
        )
    ]
