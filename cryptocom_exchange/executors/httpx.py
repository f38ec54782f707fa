"""HTTP executor implementation using httpx.

This module provides asynchronous HTTP request handling using the httpx
library. It is the default executor of the SDK.
"""

from typing_extensions import override

import httpx

from cryptocom_exchange.errors import (
    BaseError,
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
)
from cryptocom_exchange.executors.interface import HttpExecutor, HttpResponse
from cryptocom_exchange.helpers import (
    DEFAULT_API_URL,
    DEFAULT_TIMEOUT_SECONDS,
    deserialize_response,
    get_client_id,
)


class HttpxHttpExecutor(HttpExecutor):
    """HTTP executor implementation using httpx.

    Provides asynchronous HTTP request execution using ``httpx.AsyncClient``.
    """

    @override
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the HTTPX HTTP executor.

        Args:
            api_url: The endpoint request envelopes are posted to. Defaults to DEFAULT_API_URL.
            timeout: Per-request timeout in seconds, or None to wait indefinitely.
            transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

        """
        self.api_url = api_url
        self.timeout = timeout
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @override
    async def send_request(self, body: bytes) -> HttpResponse:
        """POST a serialized request envelope to the exchange.

        Args:
            body: The JSON encoded request envelope.

        Returns:
            HttpResponse containing the status code and deserialized response body.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            DeserializationError: If the response body is not valid JSON.
            TransportError: If any other transport-level error occurs.

        """
        url = self.api_url
        try:
            headers = {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": get_client_id(),
            }

            response = await self.client.post(url, headers=headers, content=body)

        except BaseError:
            raise
        except httpx.TimeoutException as e:
            raise TransportTimeoutError(
                f"POST request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except httpx.ConnectError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except httpx.NetworkError as e:
            raise HttpConnectionError(
                f"Network error during POST request to {url}", url=url
            ) from e
        except Exception as e:
            raise TransportError(f"POST request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=deserialize_response(
                response.content, url, response.status_code
            ),
            headers=dict(response.headers),
        )

    @override
    async def close(self) -> None:
        """Close the underlying httpx client."""
        await self.client.aclose()
