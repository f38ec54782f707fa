"""HTTP executor implementation using aiohttp.

This module provides asynchronous HTTP request handling using the aiohttp
library for applications that already run an aiohttp stack.
"""

import asyncio
from typing_extensions import override

import aiohttp

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


class AiohttpHttpExecutor(HttpExecutor):
    """HTTP executor implementation using aiohttp.

    Manages an aiohttp ClientSession, created lazily inside the running event loop.
    """

    @override
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize an AiohttpHttpExecutor.

        Args:
            api_url: The endpoint request envelopes are posted to. Defaults to DEFAULT_API_URL.
            timeout: Total per-request timeout in seconds, or None to wait indefinitely.

        """
        self.api_url = api_url
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers={
                    "Accept": "application/json",
                    "User-Agent": get_client_id(),
                },
            )
        return self._session

    @override
    async def send_request(self, body: bytes) -> HttpResponse:
        """POST a serialized request envelope to the exchange.

        Args:
            body: The JSON encoded request envelope.

        Returns:
            HttpResponse containing the status code and deserialized response body.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If the connection fails or drops.
            DeserializationError: If the response body is not valid JSON.
            TransportError: If any other transport-level error occurs.

        """
        url = self.api_url
        try:
            session = self._get_session()
            async with session.post(
                url, data=body, headers={"Content-Type": "application/json"}
            ) as response:
                status = response.status
                headers = dict(response.headers)
                content = await response.read()
        except BaseError:
            raise
        except asyncio.TimeoutError as e:
            raise TransportTimeoutError(
                f"POST request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except aiohttp.ClientConnectionError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except Exception as e:
            raise TransportError(f"POST request to {url} failed: {e}") from e
        return HttpResponse(
            status=status,
            body=deserialize_response(content, url, status),
            headers=headers,
        )

    @override
    async def close(self) -> None:
        """Close the executor and its underlying aiohttp session."""
        if self._session is not None:
            await self._session.close()
            self._session = None
