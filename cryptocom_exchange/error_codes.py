"""Known Crypto.com Exchange error codes.

The table is only used to describe a failed call when the exchange leaves out
its own ``message``. It can be extended without touching the dispatch logic.
"""

ERROR_CODES: dict[int, str] = {
    0: "Success",
    10001: "System error",
    10002: "Invalid request",
    10003: "Request timeout",
    10004: "IP rate limit exceeded",
    10005: "User rate limit exceeded",
    10006: "Invalid nonce",
    10007: "Invalid signature",
    20001: "Insufficient balance",
    30003: "Invalid instrument_name",
    30014: "Invalid side",
    40001: "Order not found",
    40002: "Invalid order status",
}


def get_error_message(code: int) -> str:
    """Describe an exchange error code."""
    return ERROR_CODES.get(code, f"Unknown error (code: {code})")


def register_error_code(code: int, message: str) -> None:
    """Add or replace the description of an exchange error code."""
    ERROR_CODES[code] = message
