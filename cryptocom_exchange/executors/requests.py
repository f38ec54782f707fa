"""HTTP executor implementation using requests.

requests is blocking, so every call runs in a worker thread. Cancelling the
awaiting task stops the wait but not the thread, which finishes its request
in the background and discards the answer.
"""

import asyncio
from typing_extensions import override

import requests

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


class RequestsHttpExecutor(HttpExecutor):
    @override
    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.session = requests.Session()

    def _post(self, body: bytes) -> requests.Response:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": get_client_id(),
        }
        return self.session.post(
            self.api_url, headers=headers, data=body, timeout=self.timeout
        )

    @override
    async def send_request(self, body: bytes) -> HttpResponse:
        url = self.api_url
        try:
            response = await asyncio.to_thread(self._post, body)
        except BaseError:
            raise
        except requests.Timeout as e:
            raise TransportTimeoutError(
                f"POST request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except requests.ConnectionError as e:
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
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
        self.session.close()
