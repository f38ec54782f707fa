"""Type definitions for the Crypto.com Exchange Python SDK.

This module contains type aliases, enums, and dataclasses used throughout
the SDK, organized into logical sections for clarity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import TypeAlias

# ============================================================================
# TYPE ALIASES
# ============================================================================

# JSON type hierarchy
JsonObject: TypeAlias = dict[str, "JsonValue"]
JsonArray: TypeAlias = list["JsonValue"]
JsonValue: TypeAlias = None | bool | int | float | str | JsonObject | JsonArray
Json: TypeAlias = JsonObject

# Request parameters may also carry Decimal amounts
ParamValue: TypeAlias = JsonValue | Decimal
ParamMap: TypeAlias = dict[str, ParamValue]

# Amounts, prices and quantities
NumericInput: TypeAlias = Decimal | str | float | int

# Inputs accepted wherever a millisecond timestamp is expected
TimestampInput: TypeAlias = int | float | str | datetime


# ============================================================================
# API METHODS
# ============================================================================


class ApiMethod(Enum):
    """JSON-RPC method names understood by the exchange."""

    # Spot Account
    GET_ACCOUNT_SUMMARY = "private/user-balance"
    GET_TRANSACTION_HISTORY = "private/get-transactions"
    GET_DEPOSIT_ADDRESS = "private/get-deposit-address"
    CREATE_WITHDRAWAL = "private/create-withdrawal"
    GET_WITHDRAWAL_HISTORY = "private/get-withdrawal-history"
    GET_DEPOSIT_HISTORY = "private/get-deposit-history"

    # Spot Trading
    CREATE_ORDER = "private/create-order"
    CANCEL_ORDER = "private/cancel-order"
    CANCEL_ALL_ORDERS = "private/cancel-all-orders"
    GET_OPEN_ORDERS = "private/get-open-orders"
    GET_ORDER_DETAIL = "private/get-order-detail"
    GET_ORDER_HISTORY = "private/get-order-history"
    GET_TRADES = "private/get-trades"

    # Derivatives
    GET_POSITIONS = "private/get-positions"
    CLOSE_POSITION = "private/close-position"
    GET_TRANSFER_HISTORY = "private/deriv/get-transfer-history"
    TRANSFER = "private/deriv/transfer"

    # Margin
    GET_MARGIN_ACCOUNT = "private/margin/get-user-config"
    BORROW = "private/margin/borrow"
    REPAY = "private/margin/repay"
    GET_LOAN_HISTORY = "private/margin/get-loan-history"
    GET_INTEREST_HISTORY = "private/margin/get-interest-history"

    # Market Data (public)
    GET_INSTRUMENTS = "public/get-instruments"
    GET_BOOK = "public/get-book"
    GET_TICKER = "public/get-ticker"
    GET_TICKERS = "public/get-tickers"
    GET_PUBLIC_TRADES = "public/get-trades"
    GET_CANDLESTICK = "public/get-candlestick"
    GET_VALUATIONS = "public/get-valuations"

    # Wallet
    GET_CURRENCY_NETWORKS = "private/get-currency-networks"


# ============================================================================
# OPTION ENUMS
# ============================================================================


class Side(Enum):
    """Order side."""

    BUY = "BUY"
    SELL = "SELL"


class OrderType(Enum):
    """Order type."""

    LIMIT = "LIMIT"
    MARKET = "MARKET"
    STOP_LIMIT = "STOP_LIMIT"
    STOP_LOSS = "STOP_LOSS"
    TAKE_PROFIT_LIMIT = "TAKE_PROFIT_LIMIT"

    @property
    def is_priced(self) -> bool:
        """Whether orders of this type carry a limit price."""
        return self in (
            OrderType.LIMIT,
            OrderType.STOP_LIMIT,
            OrderType.TAKE_PROFIT_LIMIT,
        )


class TimeInForce(Enum):
    """Order time in force."""

    GOOD_TILL_CANCEL = "GTC"
    IMMEDIATE_OR_CANCEL = "IOC"
    FILL_OR_KILL = "FOK"


class PositionDirection(Enum):
    """Derivatives position direction."""

    LONG = "LONG"
    SHORT = "SHORT"


class Timeframe(Enum):
    """Candlestick timeframes."""

    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    FOUR_HOURS = "4h"
    SIX_HOURS = "6h"
    TWELVE_HOURS = "12h"
    ONE_DAY = "1D"
    SEVEN_DAYS = "7D"
    FOURTEEN_DAYS = "14D"
    ONE_MONTH = "1M"


class TransferDirection(Enum):
    """Direction of a spot/derivatives wallet transfer."""

    SPOT_TO_DERIV = "SPOT_TO_DERIV"
    DERIV_TO_SPOT = "DERIV_TO_SPOT"


class WithdrawalStatus(Enum):
    """Withdrawal status codes as reported by withdrawal history."""

    PENDING = "0"
    PROCESSING = "1"
    REJECTED = "2"
    PAYMENT_IN_PROGRESS = "3"
    PAYMENT_FAILED = "4"
    COMPLETED = "5"
    CANCELLED = "6"


class DepositStatus(Enum):
    """Deposit status codes as reported by deposit history."""

    NOT_ARRIVED = "0"
    ARRIVED = "1"
    FAILED = "2"
    PENDING = "3"


# ============================================================================
# AUTHENTICATION
# ============================================================================


@dataclass(frozen=True)
class Credentials:
    """API key pair used to sign private calls.

    Both values are kept out of ``repr`` so they never end up in logs.
    """

    api_key: str = field(repr=False)
    api_secret: str = field(repr=False)


# ============================================================================
# ENVELOPES
# ============================================================================


@dataclass
class RequestEnvelope:
    """JSON-RPC style request body sent to the exchange."""

    id: int
    method: str
    nonce: int
    params: ParamMap | None = None
    api_key: str | None = field(default=None, repr=False)
    sig: str | None = field(default=None, repr=False)

    @property
    def is_private(self) -> bool:
        """Whether the envelope carries authentication."""
        return self.sig is not None

    def to_json(self) -> JsonObject:
        """Render the envelope as the wire object, leaving out absent fields."""
        body: JsonObject = {"id": self.id, "method": self.method}
        if self.params is not None:
            body["params"] = self.params  # type: ignore
        body["nonce"] = self.nonce
        if self.api_key is not None:
            body["api_key"] = self.api_key
        if self.sig is not None:
            body["sig"] = self.sig
        return body


@dataclass
class ResponseEnvelope:
    """Response body returned by the exchange.

    ``code == 0`` means success; any other value is an exchange error and
    ``result`` must not be trusted.
    """

    code: int
    id: int | None
    method: str | None
    message: str | None
    result: JsonValue

    @property
    def is_success(self) -> bool:
        """Whether the exchange accepted the call."""
        return self.code == 0
