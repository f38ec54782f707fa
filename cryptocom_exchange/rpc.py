"""Request envelopes and their dispatch to the exchange.

Every call, public or private, is a single POST of a JSON-RPC style envelope.
This module builds (and signs) those envelopes, sends them through an
executor, and turns the response envelope into either a result or an error.
"""

import asyncio
import logging

from cryptocom_exchange.error_codes import get_error_message
from cryptocom_exchange.errors import (
    ApiError,
    BadGateway,
    BadHttpStatus,
    BadRequest,
    DeserializationError,
    Forbidden,
    GatewayTimeout,
    InternalServerError,
    MissingCredentialsError,
    NotFound,
    RateLimited,
    RequestCancelledError,
    ServiceUnavailable,
    TransportTimeoutError,
    Unauthorized,
)
from cryptocom_exchange.executors.interface import HttpExecutor, HttpResponse
from cryptocom_exchange.helpers import create_with, current_millis, serialize_request
from cryptocom_exchange.signing import MAX_SAFE_INTEGER, sign_request
from cryptocom_exchange.types import (
    Credentials,
    JsonValue,
    ParamMap,
    ParamValue,
    RequestEnvelope,
    ResponseEnvelope,
)

log = logging.getLogger(__name__)


# ============================================================================
# REQUEST BUILDER
# ============================================================================


def _wire_value(value: ParamValue) -> ParamValue:
    """Send integral floats as integers so the wire text matches the signed text."""
    if (
        isinstance(value, float)
        and value.is_integer()
        and abs(value) <= MAX_SAFE_INTEGER
    ):
        return int(value)
    return value


def build_request(
    method: str,
    params: ParamMap | None = None,
    *,
    is_public: bool = False,
    credentials: Credentials | None = None,
) -> RequestEnvelope:
    """Build the envelope for one call.

    Top-level None values are dropped and integral floats become integers
    before signing, so the signed parameters are exactly the transmitted ones.
    ``params`` is left out of the envelope when nothing remains.

    Args:
        method: The API method, e.g. ``public/get-book``
        params: Flat parameter map for the call
        is_public: Public calls are never signed, even when credentials exist
        credentials: API key pair, required for private calls

    Returns:
        RequestEnvelope: A fresh envelope with id and nonce taken from the clock

    Raises:
        MissingCredentialsError: If a private call is built without credentials
        EncodingError: If the parameters cannot be canonically encoded

    """
    signer = None if is_public else credentials
    if not is_public and (
        signer is None or not signer.api_key or not signer.api_secret
    ):
        raise MissingCredentialsError(f"API credentials for {method}")

    wire_params = (
        {k: _wire_value(v) for k, v in params.items() if v is not None}
        if params
        else {}
    )

    request_id = current_millis()
    nonce = request_id
    envelope = RequestEnvelope(
        id=request_id,
        method=method,
        nonce=nonce,
        params=wire_params or None,
    )

    if signer is not None:
        envelope.api_key = signer.api_key
        envelope.sig = sign_request(
            method,
            request_id,
            signer.api_key,
            wire_params,
            nonce,
            signer.api_secret,
        )

    return envelope


# ============================================================================
# RESPONSE HANDLING
# ============================================================================


def raise_http_status(response: HttpResponse) -> None:
    """Raise the BadHttpStatus subclass matching a non-2XX response.

    Only used when the body is not a response envelope; an envelope always
    takes precedence since its code is more precise than the HTTP status.

    Args:
        response: The HTTP response to validate

    Raises:
        BadRequest: For 400 status codes
        Unauthorized: For 401 status codes
        Forbidden: For 403 status codes
        NotFound: For 404 status codes
        RateLimited: For 429 status codes
        BadHttpStatus: For other 4XX status codes
        InternalServerError: For 500 status codes
        BadGateway: For 502 status codes
        ServiceUnavailable: For 503 status codes
        GatewayTimeout: For 504 status codes

    """
    status = response.status

    if 200 <= status < 300:
        return

    error_message = str(response.body) if response.body else "<no error message>"

    # 4xx Client Errors
    if status == 400:
        raise BadRequest(status, f"Bad request: {error_message}")

    if status == 401:
        raise Unauthorized(status, f"Unauthorized: {error_message}")

    if status == 403:
        raise Forbidden(status, f"Forbidden: {error_message}")

    if status == 404:
        raise NotFound(status, f"Not found: {error_message}")

    if status == 429:
        raise RateLimited(status, f"Rate limit exceeded: {error_message}")

    if 400 <= status < 500:
        raise BadHttpStatus(status, f"Client error ({status}): {error_message}")

    # 5xx Server Errors
    if status == 500:
        raise InternalServerError(status, f"Internal server error: {error_message}")

    if status == 502:
        raise BadGateway(status, f"Bad gateway: {error_message}")

    if status == 503:
        raise ServiceUnavailable(status, f"Service unavailable: {error_message}")

    if status == 504:
        raise GatewayTimeout(status, f"Gateway timeout: {error_message}")

    if 500 <= status < 600:
        raise InternalServerError(status, f"Server error ({status}): {error_message}")

    raise BadHttpStatus(status, f"Unexpected status code ({status}): {error_message}")


def _is_envelope(body: JsonValue) -> bool:
    return (
        isinstance(body, dict)
        and isinstance(body.get("code"), int)
        and not isinstance(body.get("code"), bool)
    )


def decode_response(response: HttpResponse) -> ResponseEnvelope:
    """Decode the response envelope of an HTTP response.

    Raises:
        BadHttpStatus: If the status is not 2XX and the body is not an envelope
        DeserializationError: If a 2XX body is not an envelope

    """
    body = response.body
    if not _is_envelope(body):
        raise_http_status(response)
        raise DeserializationError(f"Response is not a Crypto.com envelope: {body!r}")

    try:
        return create_with(ResponseEnvelope, body, implicit_null=True)  # type: ignore
    except (TypeError, ValueError) as e:
        raise DeserializationError(f"Received invalid response {body=}") from e


def unwrap_response(response: HttpResponse) -> JsonValue:
    """Return the result of a successful call or raise the exchange's error.

    Returns:
        The ``result`` payload, or an empty dict when the exchange sent none

    Raises:
        ApiError: If the envelope code is non-zero

    """
    envelope = decode_response(response)
    if not envelope.is_success:
        message = envelope.message or get_error_message(envelope.code)
        raise ApiError(envelope.code, message)

    # a 2XX-shaped envelope behind an error status is still an HTTP failure
    raise_http_status(response)

    if envelope.result is None:
        return {}
    return envelope.result


# ============================================================================
# DISPATCHER
# ============================================================================


async def dispatch(
    executor: HttpExecutor,
    envelope: RequestEnvelope,
    *,
    timeout: float | None = None,
) -> JsonValue:
    """Send one envelope and interpret the exchange's answer.

    Exactly one attempt is made. Failures are raised to the caller, which owns
    any retry policy.

    Cancelling the awaiting task surfaces as ``RequestCancelledError`` rather
    than ``asyncio.CancelledError``, and the task's cancellation request is
    withdrawn (``Task.uncancel``). An enclosing ``asyncio.timeout()`` or
    ``TaskGroup`` therefore sees a ``TransportError``, not a cancellation;
    callers relying on cancellation to unwind must catch it and re-raise.

    Args:
        executor: Transport used for the POST
        envelope: The built (and, for private calls, signed) envelope
        timeout: Optional bound in seconds on the whole call

    Returns:
        The ``result`` payload of the response envelope

    Raises:
        ApiError: If the exchange rejected the call
        BadHttpStatus: If the HTTP status is an error and no envelope came back
        TransportTimeoutError: If the call exceeded ``timeout``
        RequestCancelledError: If the awaiting task was cancelled
        TransportError: On any other delivery or decoding failure

    """
    body = serialize_request(envelope.to_json())
    log.debug("Dispatching %s (id=%d)", envelope.method, envelope.id)

    try:
        async with asyncio.timeout(timeout):
            response = await executor.send_request(body)
    except TimeoutError as e:
        raise TransportTimeoutError(
            f"{envelope.method} did not complete in time", timeout_seconds=timeout
        ) from e
    except asyncio.CancelledError as e:
        # the cancellation is consumed here, keep the task's cancel count balanced
        task = asyncio.current_task()
        if task is not None and task.cancelling():
            task.uncancel()
        raise RequestCancelledError(f"{envelope.method} was cancelled") from e

    log.debug(
        "Received HTTP %d for %s (id=%d)", response.status, envelope.method, envelope.id
    )
    return unwrap_response(response)
