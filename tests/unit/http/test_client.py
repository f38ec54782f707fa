import asyncio

import pytest

from cryptocom_exchange import CryptoComApiClient
from cryptocom_exchange.errors import RequestCancelledError, TransportTimeoutError
from cryptocom_exchange.executors import HttpxHttpExecutor
from cryptocom_exchange.executors.interface import HttpResponse
from cryptocom_exchange.types import ApiMethod
from tests.mock_executors import (
    InputPack,
    MockHttpExecutor,
    MockSuccessfulOutput,
    ok,
)


class SlowHttpExecutor(MockHttpExecutor):
    async def send_request(self, body: bytes) -> HttpResponse:
        self.call_log.append(InputPack("send_request", (body,)))
        await asyncio.sleep(1.0)
        return ok()


def test_default_executor_uses_api_url():
    client = CryptoComApiClient(api_url="https://uat-api.3ona.co/exchange/v1")

    assert isinstance(client._http_executor, HttpxHttpExecutor)
    assert client._http_executor.api_url == "https://uat-api.3ona.co/exchange/v1"


@pytest.mark.asyncio
async def test_request_accepts_method_names(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        [
            MockSuccessfulOutput(
                output=ok({"foo": 1}),
                call_validation=lambda call: call.envelope["method"]
                == "private/get-order-detail",
            ),
            MockSuccessfulOutput(
                output=ok({"foo": 2}),
                call_validation=lambda call: call.envelope["method"]
                == "private/get-order-detail",
            ),
        ]
    )

    assert await client.request(ApiMethod.GET_ORDER_DETAIL, {"order_id": "1"}) == {
        "foo": 1
    }
    assert await client.request("private/get-order-detail", {"order_id": "1"}) == {
        "foo": 2
    }


@pytest.mark.asyncio
async def test_request_signature_uses_client_credentials(mock_http_client):
    from cryptocom_exchange.signing import sign_request

    client, mock_http = mock_http_client

    def verify(call) -> bool:
        envelope = call.envelope
        expected = sign_request(
            envelope["method"],
            envelope["id"],
            "FOO",
            envelope["params"],
            envelope["nonce"],
            "BAR",
        )
        return envelope["api_key"] == "FOO" and envelope["sig"] == expected

    mock_http.stage_output(MockSuccessfulOutput(output=ok(), call_validation=verify))

    await client.request("private/get-order-detail", {"order_id": "42"})


@pytest.mark.asyncio
async def test_client_timeout():
    client = CryptoComApiClient(executor=SlowHttpExecutor(), timeout=0.01)

    with pytest.raises(TransportTimeoutError):
        await client.get_tickers()


@pytest.mark.asyncio
async def test_cancelled_pagination_stops():
    executor = SlowHttpExecutor()
    client = CryptoComApiClient(executor=executor, api_key="FOO", api_secret="BAR")

    task = asyncio.create_task(
        client.request_all_items(ApiMethod.GET_TRADES, "data", page_size=1)
    )
    await asyncio.sleep(0.01)
    task.cancel()

    with pytest.raises(RequestCancelledError):
        await task

    assert len(executor.call_log) == 1


@pytest.mark.asyncio
async def test_async_context_manager_closes_executor():
    executor = MockHttpExecutor()

    async with CryptoComApiClient(executor=executor) as client:
        assert isinstance(client, CryptoComApiClient)

    assert executor.closed
