"""Tests for validation exceptions in the API client."""

import pytest

from cryptocom_exchange import CryptoComApiClient
from cryptocom_exchange.errors import MissingCredentialsError, ValidationError
from tests.mock_executors import MockHttpExecutor


def test_credentials_property_not_set():
    """Test that accessing credentials when not set raises MissingCredentialsError."""
    mock_http = MockHttpExecutor()
    client = CryptoComApiClient(executor=mock_http)

    with pytest.raises(MissingCredentialsError) as exc_info:
        _ = client.credentials

    assert "is not set" in str(exc_info.value)
    assert not client.has_credentials


def test_api_key_property_not_set():
    """Test that accessing api_key when not set raises ValidationError."""
    mock_http = MockHttpExecutor()
    client = CryptoComApiClient(executor=mock_http)

    with pytest.raises(ValidationError):
        _ = client.api_key


def test_set_credentials_invalid_type():
    """Test that setting credentials with invalid types raises ValidationError."""
    mock_http = MockHttpExecutor()
    client = CryptoComApiClient(executor=mock_http)

    with pytest.raises(ValidationError) as exc_info:
        client.set_credentials(12345, "secret")  # type: ignore

    assert isinstance(exc_info.value.__cause__, TypeError)

    with pytest.raises(ValidationError):
        client.set_credentials("key", b"secret")  # type: ignore


def test_set_credentials_requires_both():
    """Test that a key without a secret raises ValidationError."""
    mock_http = MockHttpExecutor()

    with pytest.raises(ValidationError):
        CryptoComApiClient(executor=mock_http, api_key="FOO")


def test_set_credentials_and_clear():
    """Test that credentials can be set later and cleared again."""
    mock_http = MockHttpExecutor()
    client = CryptoComApiClient(executor=mock_http)

    client.set_credentials("FOO", "BAR")
    assert client.api_key == "FOO"
    assert client.credentials.api_secret == "BAR"

    client.set_credentials(None, None)
    assert not client.has_credentials


@pytest.mark.asyncio
async def test_private_call_without_credentials_sends_nothing():
    """Test that a private call without credentials never reaches the network."""
    mock_http = MockHttpExecutor()
    client = CryptoComApiClient(executor=mock_http)

    with pytest.raises(MissingCredentialsError):
        await client.get_account_summary()

    assert mock_http.call_log == []
