import pytest

from cryptocom_exchange.types import OrderType, TransferDirection
from tests.mock_executors import MockSuccessfulOutput, ok


@pytest.mark.asyncio
async def test_get_positions(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=ok({"data": []}),
            call_validation=lambda call: call.envelope["method"]
            == "private/get-positions"
            and "params" not in call.envelope,
        )
    )

    assert await client.get_positions() == {"data": []}


@pytest.mark.asyncio
async def test_get_position(mock_http_client):
    client, mock_http = mock_http_client
    position = {
        "instrument_name": "BTCUSD-PERP",
        "quantity": "-0.1",
        "type": "PERPETUAL_SWAP",
    }

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=ok({"data": [position]}),
            call_validation=lambda call: call.envelope["params"]
            == {"instrument_name": "BTCUSD-PERP"},
        )
    )

    result = await client.get_position("BTCUSD-PERP")

    assert result["data"] == [position]


@pytest.mark.asyncio
async def test_close_position_limit(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=ok({"order_id": "15744", "client_oid": "1684d6e4"}),
            call_validation=lambda call: call.envelope["method"]
            == "private/close-position"
            and call.envelope["params"]
            == {"instrument_name": "BTCUSD-PERP", "type": "LIMIT", "price": "30000.0"},
        )
    )

    await client.close_position("BTCUSD-PERP", type=OrderType.LIMIT, price="30000.0")


@pytest.mark.asyncio
async def test_get_transfer_history(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=ok({"transfer_list": []}),
            call_validation=lambda call: call.envelope["method"]
            == "private/deriv/get-transfer-history"
            and call.envelope["params"]
            == {"currency": "USDT", "direction": "SPOT_TO_DERIV", "page": 1},
        )
    )

    await client.get_transfer_history(
        currency="usdt", direction=TransferDirection.SPOT_TO_DERIV, page=1
    )


@pytest.mark.asyncio
async def test_transfer(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=ok(),
            call_validation=lambda call: call.envelope["method"]
            == "private/deriv/transfer"
            and call.envelope["params"]
            == {"currency": "USDT", "amount": "100", "direction": "DERIV_TO_SPOT"},
        )
    )

    assert await client.transfer("usdt", 100, TransferDirection.DERIV_TO_SPOT) == {}
