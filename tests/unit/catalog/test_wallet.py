import pytest

from tests.mock_executors import MockSuccessfulOutput, ok


@pytest.mark.asyncio
async def test_get_currency_networks(mock_http_client):
    client, mock_http = mock_http_client

    mock_http.stage_output(
        MockSuccessfulOutput(
            output=ok({"update_time": 1641151604000, "currency_map": {}}),
            call_validation=lambda call: call.envelope["method"]
            == "private/get-currency-networks"
            and call.envelope["params"] == {"currency": "CRO"},
        )
    )

    result = await client.get_currency_networks("cro")

    assert result["currency_map"] == {}
