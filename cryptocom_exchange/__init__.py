"""Crypto.com Exchange Python SDK."""

from importlib.metadata import PackageNotFoundError, version

from cryptocom_exchange.api import CryptoComApiClient
from cryptocom_exchange.error_codes import (
    ERROR_CODES,
    get_error_message,
    register_error_code,
)
from cryptocom_exchange.errors import (
    ApiError,
    BadGateway,
    BadHttpStatus,
    BadRequest,
    BaseError,
    DeserializationError,
    EncodingError,
    ExchangeError,
    Forbidden,
    GatewayTimeout,
    HttpConnectionError,
    InternalServerError,
    MissingCredentialsError,
    NotFound,
    RateLimited,
    RequestCancelledError,
    SerializationError,
    ServiceUnavailable,
    TransportError,
    TransportTimeoutError,
    Unauthorized,
    ValidationError,
)
from cryptocom_exchange.executors import (
    DEFAULT_HTTP_EXECUTOR,
    AiohttpHttpExecutor,
    HttpExecutor,
    HttpResponse,
    HttpxHttpExecutor,
    RequestsHttpExecutor,
)
from cryptocom_exchange.helpers import (
    DEFAULT_API_URL,
    clean_params,
    format_number,
    print_data,
    to_timestamp_ms,
    validate_instrument_name,
)
from cryptocom_exchange.pagination import DEFAULT_PAGE_SIZE, MAX_PAGE_INDEX
from cryptocom_exchange.rpc import build_request, dispatch
from cryptocom_exchange.signing import encode_params, sign_request
from cryptocom_exchange.types import (
    ApiMethod,
    Credentials,
    DepositStatus,
    Json,
    JsonValue,
    OrderType,
    ParamMap,
    PositionDirection,
    RequestEnvelope,
    ResponseEnvelope,
    Side,
    TimeInForce,
    Timeframe,
    TransferDirection,
    WithdrawalStatus,
)


def get_version() -> str:
    """Return the installed package version, or "unknown" when not installed."""
    try:
        return version("cryptocom-exchange")
    except PackageNotFoundError:
        return "unknown"


__version__ = get_version()

__all__ = [
    "ApiError",
    "ApiMethod",
    "AiohttpHttpExecutor",
    "BadGateway",
    "BadHttpStatus",
    "BadRequest",
    "BaseError",
    "Credentials",
    "CryptoComApiClient",
    "DEFAULT_API_URL",
    "DEFAULT_HTTP_EXECUTOR",
    "DEFAULT_PAGE_SIZE",
    "DepositStatus",
    "DeserializationError",
    "ERROR_CODES",
    "EncodingError",
    "ExchangeError",
    "Forbidden",
    "GatewayTimeout",
    "HttpConnectionError",
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "InternalServerError",
    "Json",
    "JsonValue",
    "MAX_PAGE_INDEX",
    "MissingCredentialsError",
    "NotFound",
    "OrderType",
    "ParamMap",
    "PositionDirection",
    "RateLimited",
    "RequestCancelledError",
    "RequestEnvelope",
    "RequestsHttpExecutor",
    "ResponseEnvelope",
    "SerializationError",
    "ServiceUnavailable",
    "Side",
    "TimeInForce",
    "Timeframe",
    "TransferDirection",
    "TransportError",
    "TransportTimeoutError",
    "Unauthorized",
    "ValidationError",
    "WithdrawalStatus",
    "build_request",
    "clean_params",
    "dispatch",
    "encode_params",
    "format_number",
    "get_error_message",
    "get_version",
    "print_data",
    "register_error_code",
    "sign_request",
    "to_timestamp_ms",
    "validate_instrument_name",
]
