"""Exception hierarchy for the Crypto.com Exchange SDK.

This module defines the public exception hierarchy for the entire SDK. All exceptions
raised by this library inherit from BaseError.

Exception Hierarchy
-------------------
BaseError
├── ExchangeError - The exchange rejected the call or answered with a bad HTTP status
├── TransportError - Network/protocol-level errors during transmission
└── ValidationError - Client-side input validation failures
"""


class BaseError(Exception):
    """Root of every error raised by this SDK.

    Never raised itself; catch it to handle any SDK failure in one place.
    """

    pass


# ============================================================================
# EXCHANGE ERROR
# ============================================================================


class ExchangeError(BaseError):
    """Exception raised when the exchange, or its gateway, refused the call.

    The request reached the exchange side and a definite answer came back:
    either an envelope with a non-zero ``code`` or a bare non-2XX status.
    """

    pass


class ApiError(ExchangeError):
    """Raised when the response envelope carries a non-zero ``code``.

    The ``result`` of such a response is never returned to the caller.
    """

    code: int
    message: str

    def __init__(self, code: int, message: str):
        """Initialize an ApiError.

        Args:
            code: The exchange-defined error code from the response envelope.
            message: The exchange message, or the known description of the code.

        """
        self.code = code
        self.message = message
        super().__init__(f"Crypto.com API error {code}: {message}")


class BadHttpStatus(ExchangeError):
    """Raised when response status from exchange is not 2XX and carries no envelope."""

    status_code: int
    message: str

    def __init__(self, status_code: int, message: str):
        """Initialize a BadHttpStatus error.

        Args:
            status_code: The HTTP status code returned by the server.
            message: Description of the HTTP error.

        """
        self.status_code = status_code
        self.message = message
        super().__init__(message)


## 5xx status errors


class InternalServerError(BadHttpStatus):
    """HTTP 500 from the exchange gateway without a response envelope."""

    pass


class BadGateway(BadHttpStatus):
    """HTTP 502, usually from a proxy in front of the exchange."""

    pass


class ServiceUnavailable(BadHttpStatus):
    """HTTP 503, typically during exchange maintenance."""

    pass


class GatewayTimeout(BadHttpStatus):
    """HTTP 504, the gateway gave up waiting for the exchange."""

    pass


## 4xx status errors


class BadRequest(BadHttpStatus):
    """HTTP 400 without an envelope code."""

    pass


class NotFound(BadHttpStatus):
    """HTTP 404, usually a wrong base URL or API version."""

    pass


class RateLimited(BadHttpStatus):
    """HTTP 429, the per-method request rate was exceeded."""

    pass


class Unauthorized(BadHttpStatus):
    """HTTP 401, the gateway rejected the API key."""

    pass


class Forbidden(BadHttpStatus):
    """HTTP 403, often an IP allow-list mismatch."""

    pass


# ============================================================================
# TRANSPORT ERROR
# ============================================================================


class TransportError(BaseError):
    """Exception raised when a call did not produce a usable response envelope.

    No exchange verdict is available for the call. Whether the exchange acted
    on it is unknown, so a private write (an order, a withdrawal) must be
    checked before it is resent. The SDK never retries on its own.

    Failure points:

    Before sending:
    - The request envelope could not be encoded as JSON
    - TLS or DNS failures in the HTTP client

    While waiting:
    - Connection refused, reset or dropped
    - The client or executor timeout elapsed
    - The awaiting task was cancelled

    After receiving:
    - A 2XX body that is not JSON or not a response envelope
    """

    pass


class HttpConnectionError(TransportError):
    """Raised when a connection cannot be established or is lost."""

    def __init__(self, message: str, url: str | None = None):
        """Initialize an HttpConnectionError.

        Args:
            message: Description of the connection error.
            url: The URL that failed to connect, if available.

        """
        self.message = message
        self.url = url
        if url:
            super().__init__(f"{message} (url: {url})")
        else:
            super().__init__(message)


class TransportTimeoutError(TransportError):
    """Raised when a request or connection times out."""

    def __init__(self, message: str, timeout_seconds: float | None = None):
        """Initialize a TransportTimeoutError.

        Args:
            message: Description of the timeout error.
            timeout_seconds: The timeout duration in seconds, if available.

        """
        self.message = message
        self.timeout_seconds = timeout_seconds
        if timeout_seconds:
            super().__init__(f"{message} (timeout: {timeout_seconds}s)")
        else:
            super().__init__(message)


class RequestCancelledError(TransportError):
    """Raised when the task awaiting a request is cancelled mid-flight."""

    def __init__(self, message: str):
        """Initialize a RequestCancelledError.

        Args:
            message: Description of the cancelled request.

        """
        self.message = message
        super().__init__(message)


class DeserializationError(TransportError):
    """Raised when response data cannot be deserialized/decoded."""

    def __init__(self, message: str):
        """Initialize a DeserializationError.

        Args:
            message: Description of the deserialization error.

        """
        self.message = message
        super().__init__(message)


class SerializationError(TransportError):
    """Raised when request data cannot be serialized/encoded."""

    def __init__(self, message: str):
        """Initialize a SerializationError.

        Args:
            message: Description of the serialization error.

        """
        self.message = message
        super().__init__(message)


# ============================================================================
# VALIDATION ERROR
# ============================================================================


class ValidationError(BaseError):
    """Exception raised when a call is rejected locally before anything is sent.

    Covers malformed amounts and timestamps, priced orders without a price,
    parameters that cannot be encoded for signing, and private calls made
    without credentials. Nothing reached the exchange, so fixing the input
    and calling again is always safe.
    """

    pass


class EncodingError(ValidationError):
    """Raised when a parameter map cannot be canonically encoded for signing."""

    def __init__(self, message: str):
        """Initialize an EncodingError.

        Args:
            message: Description of the offending key or value.

        """
        self.message = message
        super().__init__(message)


class MissingCredentialsError(ValidationError):
    """Raised when a private call is attempted without API credentials."""

    def __init__(self, credential_type: str = "API credentials"):
        """Initialize a MissingCredentialsError.

        Args:
            credential_type: The type of credential that is missing.

        """
        self.credential_type = credential_type
        super().__init__(f"{credential_type} is not set")
