"""Request signing for private Crypto.com Exchange calls.

The exchange verifies a private call by recomputing an HMAC-SHA256 over

    method + id + api_key + <canonical params> + nonce

where the canonical params are the top-level keys in sorted order, each key
immediately followed by its value, with no separators anywhere. Any change to
this encoding invalidates every signature, so it is kept in one place.
"""

import hmac
import math
from decimal import Decimal
from hashlib import sha256

import orjson

from cryptocom_exchange.errors import EncodingError
from cryptocom_exchange.helpers import decimal_as_str
from cryptocom_exchange.types import ParamMap, ParamValue

# Largest integer a float (and a JS number) holds exactly
MAX_SAFE_INTEGER = 2**53 - 1


def _value_to_str(key: str, value: ParamValue) -> str:
    """Render a single non-null parameter value."""
    if isinstance(value, str):
        return value
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(f"Parameter {key!r} is not a finite number: {value}")
        if value.is_integer():
            if abs(value) > MAX_SAFE_INTEGER:
                raise EncodingError(
                    f"Parameter {key!r} is too large to be sent exactly: {value}"
                )
            return str(int(value))
        # same text orjson puts on the wire
        return orjson.dumps(value).decode()
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodingError(f"Parameter {key!r} is not a finite number: {value}")
        return format(value, "f")
    if isinstance(value, (dict, list)):
        try:
            return orjson.dumps(value, default=decimal_as_str).decode()
        except TypeError as e:
            raise EncodingError(f"Parameter {key!r} is not JSON serializable") from e
    raise EncodingError(
        f"Parameter {key!r} has unsupported type {type(value).__name__}"
    )


def encode_params(params: ParamMap | None) -> str:
    """Serialize a parameter map into the canonical signing string.

    Args:
        params: Parameter map; entries whose value is None are skipped

    Returns:
        The concatenation of ``key + value`` for every key in sorted order,
        or an empty string when there is nothing to encode

    Raises:
        EncodingError: If a key is not a string or a value cannot be rendered

    """
    if not params:
        return ""

    for key in params:
        if not isinstance(key, str):
            raise EncodingError(f"Parameter keys must be strings, got {key!r}")

    parts: list[str] = []
    for key in sorted(params):
        value = params[key]
        if value is None:
            continue
        parts.append(key)
        parts.append(_value_to_str(key, value))
    return "".join(parts)


def sign_request(
    method: str,
    request_id: int,
    api_key: str,
    params: ParamMap | None,
    nonce: int,
    secret: str,
) -> str:
    """Compute the signature of a private request.

    Args:
        method: The API method, e.g. ``private/create-order``
        request_id: The envelope id
        api_key: The API key the call is made with
        params: The request parameters
        nonce: The envelope nonce
        secret: The API secret used as HMAC key

    Returns:
        str: Lowercase hex HMAC-SHA256 digest (64 characters)

    """
    payload = f"{method}{request_id}{api_key}{encode_params(params)}{nonce}"
    return hmac.new(secret.encode("utf-8"), payload.encode("utf-8"), sha256).hexdigest()
