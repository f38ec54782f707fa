"""Helper utilities for the Crypto.com Exchange Python SDK.

This module contains utility functions for serialization, deserialization,
request parameter preparation, time handling, and display formatting.
"""

import inspect
import logging
import re
from dataclasses import asdict, is_dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from time import time_ns
from types import NoneType
from typing import Any, Callable, Dict, TypeVar, get_args, get_origin

import orjson
from prettyprinter import cpprint

from cryptocom_exchange.errors import (
    DeserializationError,
    SerializationError,
    ValidationError,
)
from cryptocom_exchange.types import JsonValue, NumericInput, ParamMap, TimestampInput

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_API_URL: str = "https://api.crypto.com/exchange/v1"
DEFAULT_TIMEOUT_SECONDS: float = 30.0

# Values below this are taken to be seconds rather than milliseconds
_SECONDS_THRESHOLD = 10_000_000_000

INSTRUMENT_NAME_PATTERN = re.compile(r"^[A-Z0-9]+_[A-Z0-9]+$")
DECIMAL_PATTERN = re.compile(r"^\d+(\.\d+)?$")


# ============================================================================
# CLIENT IDENTIFICATION
# ============================================================================


@lru_cache(maxsize=1)
def get_client_id() -> str:
    """Get the SDK identification string sent as User-Agent."""
    import cryptocom_exchange

    return f"CryptoComPythonSDK/{cryptocom_exchange.__version__}"


# ============================================================================
# REFLECTION UTILITIES
# ============================================================================


@lru_cache(maxsize=8)
def _required_fields(signature: inspect.Signature) -> list[str]:
    """Extract list of required parameter names from a function signature."""
    return [
        name
        for name, param in signature.parameters.items()
        if param.default is inspect.Parameter.empty
        and param.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        )
    ]


@lru_cache(maxsize=8)
def _required_nullable_fields(signature: inspect.Signature) -> list[str]:
    """Return names of parameters that are required and whose annotation allows None."""
    required_nullable: list[str] = []
    for name, param in signature.parameters.items():
        if name not in _required_fields(signature):
            continue

        ann = param.annotation
        if ann is inspect.Parameter.empty:
            continue

        origin, args = get_origin(ann), get_args(ann)

        if ann is NoneType:
            required_nullable.append(name)
        elif origin is not None and NoneType in args:
            required_nullable.append(name)

    return required_nullable


# ============================================================================
# OBJECT CONSTRUCTION
# ============================================================================

T = TypeVar("T")


def create_with(
    func: Callable[..., T], data: Dict[str, Any], *, implicit_null: bool = False
) -> T:
    """Create an object from a dictionary, filtering to only valid parameters.

    This allows constructing objects from exchange responses that may contain
    additional fields beyond what the constructor expects.

    Args:
        func: Constructor or factory function to call
        data: Dictionary of data to pass as kwargs
        implicit_null: If True, add explicit None values for required nullable fields

    Returns:
        Instance created by calling func with filtered data

    """
    sig = inspect.signature(func)
    valid_keys = sig.parameters.keys()
    filtered_data = {k: v for k, v in data.items() if k in valid_keys}
    if implicit_null:
        missing_fields = (
            field
            for field in _required_nullable_fields(sig)
            if field not in filtered_data
        )
        filtered_data.update({field: None for field in missing_fields})

    return func(**filtered_data)


# ============================================================================
# SERIALIZATION / DESERIALIZATION
# ============================================================================


def decimal_as_str(obj: object) -> str:
    """Serialize Decimal objects to JSON strings.

    Converts Decimal to string to preserve precision in JSON serialization.
    """
    if isinstance(obj, Decimal):
        return format(obj, "f")

    raise TypeError


def serialize_request(request: JsonValue) -> bytes:
    """Serialize a request envelope to JSON bytes.

    Args:
        request: Request data to serialize

    Returns:
        Compact JSON bytes

    Raises:
        SerializationError: If serialization fails

    """
    try:
        return orjson.dumps(request, default=decimal_as_str)
    except Exception as e:
        # never echo the envelope, it may carry the api key
        raise SerializationError(f"Failed to serialize request: {e}") from e


def deserialize_response(
    response_body: bytes, url: str, status: int = 200
) -> JsonValue:
    """Deserialize a JSON response body.

    Error responses from proxies are often not JSON; for a non-2XX status an
    undecodable body is returned as text so the status can still be reported.

    Args:
        response_body: Response bytes to deserialize
        url: URL that was requested (for error messages)
        status: HTTP status of the response

    Returns:
        Deserialized JSON value

    Raises:
        DeserializationError: If deserialization fails

    """
    try:
        return orjson.loads(response_body)  # type: ignore
    except Exception as e:
        if not 200 <= status < 300:
            return response_body.decode("utf-8", errors="replace")
        raise DeserializationError(
            f"Failed to parse JSON response from {url}: {e}"
        ) from e


# ============================================================================
# REQUEST PARAMETERS
# ============================================================================


def clean_params(params: ParamMap) -> ParamMap:
    """Drop options that were not provided (None or empty string)."""
    return {k: v for k, v in params.items() if v is not None and v != ""}


def upper_or_none(value: str | None) -> str | None:
    """Upper-case an optional currency code."""
    return value.upper() if value else None


def numeric_to_str(n: NumericInput) -> str:
    """Render an amount, price or quantity as a full precision decimal string."""
    if isinstance(n, str):
        if not DECIMAL_PATTERN.match(n):
            raise ValidationError(f"Invalid numeric input {n}")
        return n
    if isinstance(n, bool):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if isinstance(n, (int, float)):
        n = Decimal(str(n))
    if not isinstance(n, Decimal):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if not n.is_finite() or n < 0:
        raise ValidationError(f"Invalid numeric input {n}")
    return format(n, "f")


def numeric_or_none(n: NumericInput | None) -> str | None:
    """Render an optional amount, passing None through."""
    return None if n is None else numeric_to_str(n)


def validate_instrument_name(instrument_name: str) -> bool:
    """Check that an instrument name looks like ``BASE_QUOTE`` (e.g. ``BTC_USDT``)."""
    return INSTRUMENT_NAME_PATTERN.match(instrument_name) is not None


def format_number(value: int | float | str | Decimal, precision: int = 8) -> str:
    """Format a number for the API with at most ``precision`` decimals.

    Trailing zeros and a dangling decimal point are stripped.
    """
    try:
        number = Decimal(str(value))
    except InvalidOperation as e:
        raise ValidationError(f"Invalid numeric input {value!r}") from e
    text = f"{number:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


# ============================================================================
# TIME UTILITIES
# ============================================================================


def current_millis() -> int:
    """Wall-clock time in milliseconds, used for request ids and nonces."""
    return time_ns() // 1_000_000


def to_timestamp_ms(value: TimestampInput) -> int:
    """Convert a timestamp to epoch milliseconds.

    Numbers with fewer than 11 integer digits are taken to be seconds. Strings
    of digits are read as numbers, any other string as ISO-8601.

    Raises:
        ValidationError: If the value cannot be interpreted as a timestamp

    """
    if isinstance(value, bool):
        raise ValidationError(f"Invalid timestamp value: {value!r}")
    if isinstance(value, datetime):
        return int(value.timestamp() * 1000)
    if isinstance(value, (int, float)):
        return int(value * 1000 if value < _SECONDS_THRESHOLD else value)
    if isinstance(value, str):
        if value.isdigit():
            numeric = int(value)
            return numeric * 1000 if numeric < _SECONDS_THRESHOLD else numeric
        try:
            return int(datetime.fromisoformat(value).timestamp() * 1000)
        except ValueError:
            raise ValidationError(f"Invalid timestamp value: {value}") from None
    raise ValidationError(f"Invalid timestamp value type {type(value)}")


def timestamp_or_none(value: TimestampInput | None) -> int | None:
    """Convert an optional timestamp, passing None through."""
    return None if value is None else to_timestamp_ms(value)


# ============================================================================
# DISPLAY UTILITIES
# ============================================================================


def print_data(response: Any) -> None:
    """Pretty-print response data, handling dataclasses specially.

    Args:
        response: Data to print

    """
    if is_dataclass(response) and not isinstance(response, type):
        cpprint(asdict(response))
    else:
        cpprint(response)
