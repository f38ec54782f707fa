import httpx
import orjson
import pytest

from cryptocom_exchange.errors import (
    DeserializationError,
    HttpConnectionError,
    TransportTimeoutError,
)
from cryptocom_exchange.executors import (
    DEFAULT_HTTP_EXECUTOR,
    AiohttpHttpExecutor,
    HttpxHttpExecutor,
    RequestsHttpExecutor,
)
from cryptocom_exchange.helpers import DEFAULT_API_URL
from cryptocom_exchange.rpc import build_request, dispatch


def test_default_executor():
    assert DEFAULT_HTTP_EXECUTOR is HttpxHttpExecutor


@pytest.mark.asyncio
async def test_httpx_posts_envelope():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"id": 1, "method": "public/get-tickers", "code": 0, "result": {}},
        )

    executor = HttpxHttpExecutor(transport=httpx.MockTransport(handler))
    envelope = build_request("public/get-tickers", is_public=True)

    result = await dispatch(executor, envelope)
    await executor.close()

    assert result == {}
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "POST"
    assert str(request.url) == DEFAULT_API_URL
    assert request.headers["Content-Type"] == "application/json"
    assert request.headers["User-Agent"].startswith("CryptoComPythonSDK/")
    assert orjson.loads(request.content) == envelope.to_json()


@pytest.mark.asyncio
async def test_httpx_timeout():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    executor = HttpxHttpExecutor(timeout=5.0, transport=httpx.MockTransport(handler))

    with pytest.raises(TransportTimeoutError) as exc_info:
        await executor.send_request(b"{}")
    await executor.close()

    assert exc_info.value.timeout_seconds == 5.0


@pytest.mark.asyncio
async def test_httpx_connect_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    executor = HttpxHttpExecutor(transport=httpx.MockTransport(handler))

    with pytest.raises(HttpConnectionError) as exc_info:
        await executor.send_request(b"{}")
    await executor.close()

    assert exc_info.value.url == DEFAULT_API_URL


@pytest.mark.asyncio
async def test_httpx_invalid_json():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not json")

    executor = HttpxHttpExecutor(transport=httpx.MockTransport(handler))

    with pytest.raises(DeserializationError):
        await executor.send_request(b"{}")
    await executor.close()


@pytest.mark.asyncio
async def test_httpx_error_page_kept_as_text():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, content=b"<html>Bad Gateway</html>")

    executor = HttpxHttpExecutor(transport=httpx.MockTransport(handler))

    response = await executor.send_request(b"{}")
    await executor.close()

    assert response.status == 502
    assert response.body == "<html>Bad Gateway</html>"


def test_alternative_executors_configuration():
    aiohttp_executor = AiohttpHttpExecutor(
        api_url="https://example.invalid", timeout=3
    )
    requests_executor = RequestsHttpExecutor(
        api_url="https://example.invalid", timeout=3
    )

    assert aiohttp_executor.api_url == "https://example.invalid"
    assert aiohttp_executor.timeout == 3
    assert requests_executor.api_url == "https://example.invalid"
    assert requests_executor.timeout == 3
    requests_executor.session.close()


@pytest.mark.asyncio
async def test_requests_executor_connection_error(monkeypatch):
    import requests

    executor = RequestsHttpExecutor()

    def refuse(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(executor.session, "post", refuse)

    with pytest.raises(HttpConnectionError):
        await executor.send_request(b"{}")
    await executor.close()


@pytest.mark.asyncio
async def test_requests_executor_timeout(monkeypatch):
    import requests

    executor = RequestsHttpExecutor(timeout=2.0)

    def slow(*args, **kwargs):
        raise requests.ReadTimeout("read timed out")

    monkeypatch.setattr(executor.session, "post", slow)

    with pytest.raises(TransportTimeoutError):
        await executor.send_request(b"{}")
    await executor.close()
