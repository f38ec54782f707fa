"""Abstract interface for HTTP executors.

This module defines the abstract base class that all HTTP executor
implementations must follow, enabling pluggable transport layers.
"""

from abc import ABC, abstractmethod

from cryptocom_exchange.types import JsonValue


class HttpResponse:
    """Container for HTTP response data.

    Encapsulates the status code, decoded body, and headers from an HTTP response.
    """

    status: int
    body: JsonValue
    headers: dict[str, str] | None

    __slots__ = ("status", "body", "headers")

    def __init__(
        self,
        *,
        status: int,
        body: JsonValue = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize an HTTP response object.

        Args:
            status: The HTTP status code of the response.
            body: The decoded JSON response body. Defaults to an empty dict if None.
            headers: Optional HTTP response headers as key-value pairs.

        """
        self.status = status
        self.body = body if body is not None else {}
        self.headers = headers


class HttpExecutor(ABC):
    """Abstract base class for HTTP request executors.

    An executor owns the connection pool and posts serialized request envelopes
    to a single, fixed endpoint. It performs exactly one attempt per call.
    """

    api_url: str

    @abstractmethod
    def __init__(self, api_url: str):
        """Initialize the HTTP executor.

        Args:
            api_url: The endpoint every request envelope is posted to.

        """
        ...

    @abstractmethod
    async def send_request(self, body: bytes) -> HttpResponse:
        """POST a serialized request envelope.

        Args:
            body: The JSON encoded request envelope.

        Returns:
            An HttpResponse object containing the status, decoded body, and headers.

        Raises:
            TransportError: If the request cannot be delivered or the response
                body cannot be decoded.

        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying connection pool."""
        ...
