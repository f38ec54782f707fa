import hmac
import random
import re
from decimal import Decimal
from hashlib import sha256

import pytest

from cryptocom_exchange.errors import EncodingError, ValidationError
from cryptocom_exchange.signing import encode_params, sign_request

HEX_DIGEST = re.compile(r"^[a-f0-9]{64}$")


def test_encode_sorts_top_level_keys():
    assert encode_params({"z": "last", "a": "first", "m": "middle"}) == (
        "afirstmmiddlezlast"
    )


def test_encode_numbers_unquoted():
    assert encode_params({"count": 100, "page": 0}) == "count100page0"


def test_encode_empty():
    assert encode_params({}) == ""
    assert encode_params(None) == ""


def test_encode_skips_none():
    assert encode_params({"a": None, "b": None}) == ""
    assert encode_params({"a": "x", "b": None}) == "ax"


def test_encode_nested_as_compact_json():
    assert encode_params({"data": {"nested": "value"}}) == 'data{"nested":"value"}'
    assert encode_params({"ids": [1, 2, 3]}) == "ids[1,2,3]"


def test_encode_nested_keeps_inner_order():
    encoded = encode_params({"x": {"b": 1, "a": 2}})
    assert encoded == 'x{"b":1,"a":2}'


@pytest.mark.parametrize(
    "value, rendered",
    [
        (True, "true"),
        (False, "false"),
        (1.5, "1.5"),
        (-0.25, "-0.25"),
        (2.0, "2"),
        (float(2**53 - 1), "9007199254740991"),
        (Decimal("0.00010"), "0.00010"),
        ("", ""),
    ],
)
def test_encode_scalar_rendering(value, rendered):
    assert encode_params({"k": value}) == f"k{rendered}"


def test_encode_invariant_to_insertion_order():
    params = {
        "instrument_name": "BTC_USDT",
        "side": "BUY",
        "type": "LIMIT",
        "price": "50000",
        "quantity": "0.001",
        "client_oid": "abc",
        "page": 0,
    }
    expected = encode_params(params)
    rng = random.Random(7)
    for _ in range(20):
        items = list(params.items())
        rng.shuffle(items)
        assert encode_params(dict(items)) == expected


@pytest.mark.parametrize(
    "params",
    [
        {"bad": float("nan")},
        {"bad": float("inf")},
        {"bad": float(2**60)},
        {"bad": Decimal("NaN")},
        {"bad": object()},
        {"bad": {"inner": object()}},
        {1: "not a string key"},
    ],
)
def test_encode_rejects_unencodable(params):
    with pytest.raises(EncodingError):
        encode_params(params)


def test_encoding_error_is_validation_error():
    with pytest.raises(ValidationError):
        encode_params({"bad": object()})


def test_sign_matches_reference_hmac():
    params = {"instrument_name": "BTC_USDT", "depth": 10}
    sig = sign_request(
        "private/get-book", 1587523073344, "key", params, 1587523073344, "secret"
    )

    payload = (
        "private/get-book1587523073344key"
        "depth10instrument_nameBTC_USDT"
        "1587523073344"
    )
    expected = hmac.new(b"secret", payload.encode(), sha256).hexdigest()
    assert sig == expected


def test_sign_is_lowercase_hex():
    sig = sign_request("private/user-balance", 1, "FOO", {}, 1, "BAR")
    assert HEX_DIGEST.match(sig)


def test_sign_is_deterministic():
    args = ("private/create-order", 42, "FOO", {"side": "BUY"}, 42, "BAR")
    assert sign_request(*args) == sign_request(*args)


def test_sign_changes_with_params():
    buy = sign_request("private/create-order", 42, "FOO", {"side": "BUY"}, 42, "BAR")
    sell = sign_request("private/create-order", 42, "FOO", {"side": "SELL"}, 42, "BAR")
    assert buy != sell


@pytest.mark.parametrize(
    "changed",
    [
        ("private/cancel-order", 42, "FOO", {"side": "BUY"}, 42, "BAR"),
        ("private/create-order", 43, "FOO", {"side": "BUY"}, 42, "BAR"),
        ("private/create-order", 42, "FOX", {"side": "BUY"}, 42, "BAR"),
        ("private/create-order", 42, "FOO", {"side": "BUY"}, 43, "BAR"),
        ("private/create-order", 42, "FOO", {"side": "BUY"}, 42, "BAZ"),
    ],
)
def test_sign_changes_with_every_input(changed):
    base = sign_request("private/create-order", 42, "FOO", {"side": "BUY"}, 42, "BAR")
    assert sign_request(*changed) != base
