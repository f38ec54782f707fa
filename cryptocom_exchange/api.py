"""HTTP API client for the Crypto.com Exchange.

This module provides the main CryptoComApiClient class. Every exchange call
goes through :meth:`CryptoComApiClient.request`; the endpoint methods below it
only shape parameters for one method name each.
"""

import logging
from types import NoneType, TracebackType
from typing import Any, AsyncIterator, cast

from cryptocom_exchange.errors import MissingCredentialsError, ValidationError
from cryptocom_exchange.executors import DEFAULT_HTTP_EXECUTOR, HttpExecutor
from cryptocom_exchange.helpers import (
    DEFAULT_API_URL,
    clean_params,
    numeric_or_none,
    numeric_to_str,
    timestamp_or_none,
    upper_or_none,
)
from cryptocom_exchange.pagination import DEFAULT_PAGE_SIZE, collect_all, paginate_all
from cryptocom_exchange.rpc import build_request, dispatch
from cryptocom_exchange.types import (
    ApiMethod,
    Credentials,
    DepositStatus,
    Json,
    JsonValue,
    NumericInput,
    OrderType,
    ParamMap,
    Side,
    TimeInForce,
    Timeframe,
    TimestampInput,
    TransferDirection,
    WithdrawalStatus,
)

log = logging.getLogger(__name__)


def _method_name(method: ApiMethod | str) -> str:
    return method.value if isinstance(method, ApiMethod) else method


def _history_params(
    currency: str | None = None,
    start_ts: TimestampInput | None = None,
    end_ts: TimestampInput | None = None,
    page_size: int | None = None,
    page: int | None = None,
    **extra: Any,
) -> ParamMap:
    """Shape the common filters of history endpoints.

    ``page=0`` is a real value and is kept.
    """
    return clean_params(
        {
            "currency": upper_or_none(currency),
            "start_ts": timestamp_or_none(start_ts),
            "end_ts": timestamp_or_none(end_ts),
            "page_size": page_size,
            "page": page,
            **extra,
        }
    )


class CryptoComApiClient:
    """Crypto.com Exchange API client.

    Examples:
        .. code-block:: python

            import asyncio

            from cryptocom_exchange import CryptoComApiClient
            from cryptocom_exchange.env_setup import setup_environment

            async def main():
                api_endpoint, api_key, api_secret = setup_environment()
                async with CryptoComApiClient(
                    api_url=api_endpoint, api_key=api_key, api_secret=api_secret
                ) as client:
                    summary = await client.get_account_summary()
                    print(summary)

                    book = await client.get_book("BTC_USDT", depth=10)
                    print(book)

            asyncio.run(main())
    """

    _credentials: Credentials | None = None

    _http_executor: HttpExecutor

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        api_key: str | None = None,
        api_secret: str | None = None,
        executor: HttpExecutor | None = None,
        timeout: float | None = None,
    ):
        """Initialize the Crypto.com API client.

        Args:
            api_url: Base URL of the exchange API (default: production URL)
            api_key: Your API key (optional, can be set later)
            api_secret: Your API secret (optional, can be set later)
            executor: Custom HTTP executor (optional, uses default if not provided)
            timeout: Optional bound in seconds on every call, on top of the
                executor's own transport timeout

        """
        self._http_executor = (
            executor if executor is not None else DEFAULT_HTTP_EXECUTOR(api_url=api_url)
        )
        self._timeout = timeout
        self.set_credentials(api_key, api_secret)

    @property
    def credentials(self) -> Credentials:
        """Get the configured credentials.

        Raises:
            MissingCredentialsError: If no API key pair has been set

        """
        if self._credentials is None:
            raise MissingCredentialsError()
        return self._credentials

    @property
    def has_credentials(self) -> bool:
        """Whether private calls can be signed."""
        return self._credentials is not None

    @property
    def api_key(self) -> str:
        """Get the current API key.

        Raises:
            MissingCredentialsError: If no API key pair has been set

        """
        return self.credentials.api_key

    def set_credentials(self, api_key: str | None, api_secret: str | None) -> None:
        """Set the API key pair used to sign private calls.

        Passing None for both clears the credentials.

        Args:
            api_key: The API key string
            api_secret: The API secret string

        Raises:
            ValidationError: If either value has an invalid type, or only one of
                them is provided

        """
        _api_key = cast(Any, api_key)
        _api_secret = cast(Any, api_secret)
        if not isinstance(_api_key, (str, NoneType)):
            raise ValidationError from TypeError(
                f"Unexpected type for api_key {type(api_key)}"
            )
        if not isinstance(_api_secret, (str, NoneType)):
            raise ValidationError from TypeError(
                f"Unexpected type for api_secret {type(api_secret)}"
            )

        if not api_key and not api_secret:
            self._credentials = None
            return
        if not api_key or not api_secret:
            raise ValidationError("api_key and api_secret must be set together")

        self._credentials = Credentials(api_key=api_key, api_secret=api_secret)

    async def close(self) -> None:
        """Release the underlying HTTP executor."""
        await self._http_executor.close()

    async def __aenter__(self) -> "CryptoComApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()

    ### ------------------------------------------------ Core ------------------------------------------------

    async def request(
        self,
        method: ApiMethod | str,
        params: ParamMap | None = None,
        is_public: bool = False,
    ) -> JsonValue:
        """Perform one exchange call.

        Builds the envelope, signs it unless ``is_public`` is set, POSTs it and
        returns the ``result`` of the response. No retries are made.

        Args:
            method: The API method, e.g. ``ApiMethod.GET_BOOK`` or ``"public/get-book"``
            params: Parameters of the call
            is_public: Public calls are sent unsigned

        Returns:
            JsonValue: The ``result`` payload, ``{}`` when the exchange sent none

        Raises:
            MissingCredentialsError: If a private call is made without credentials;
                nothing is sent in that case
            EncodingError: If the parameters cannot be canonically encoded
            ApiError: If the exchange answered with a non-zero code
            BadHttpStatus: If the HTTP status is an error and no envelope came back
            TransportError: If the call could not be delivered or decoded

        Example:
            .. code-block:: python

                result = await client.request(
                    "public/get-book", {"instrument_name": "BTC_USDT", "depth": 10},
                    is_public=True,
                )

        """
        envelope = build_request(
            _method_name(method),
            params,
            is_public=is_public,
            credentials=None if is_public else self._credentials,
        )
        return await dispatch(self._http_executor, envelope, timeout=self._timeout)

    async def _send(
        self, method: str, params: ParamMap, is_public: bool
    ) -> JsonValue:
        return await self.request(method, params, is_public)

    def iter_all_items(
        self,
        method: ApiMethod | str,
        result_key: str,
        params: ParamMap | None = None,
        is_public: bool = False,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> AsyncIterator[JsonValue]:
        """Iterate lazily over every item of a paginated endpoint.

        Pages are fetched one at a time starting at page 0 until a short page
        comes back. At most 101 pages are fetched.

        Args:
            method: The API method to page through
            result_key: Key of the item list inside each result, e.g. ``"data"``
            params: Filters sent with every page
            is_public: Whether the endpoint is public
            page_size: Items requested per page

        Example:
            .. code-block:: python

                async for order in client.iter_all_items(
                    ApiMethod.GET_ORDER_HISTORY, "data", {"instrument_name": "BTC_USDT"}
                ):
                    print(order)

        """
        return paginate_all(
            self._send, _method_name(method), params, result_key, is_public, page_size
        )

    async def request_all_items(
        self,
        method: ApiMethod | str,
        result_key: str,
        params: ParamMap | None = None,
        is_public: bool = False,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> list[JsonValue]:
        """Fetch every item of a paginated endpoint into a list.

        See :meth:`iter_all_items` for the paging rules.
        """
        return await collect_all(
            self._send, _method_name(method), params, result_key, is_public, page_size
        )

    ### ------------------------------------------------ Spot Account ------------------------------------------------

    async def get_account_summary(self) -> Json:
        """Get balances of every currency in the spot account.

        Returns:
            Json: The balance summary, with one entry per currency under ``data``

        Example:
            .. code-block:: python

                summary = await client.get_account_summary()
                for balance in summary["data"]:
                    print(balance)

        Endpoint:
            private/user-balance

        """
        return await self.request(ApiMethod.GET_ACCOUNT_SUMMARY)  # type: ignore

    async def get_account_balance(self, currency: str) -> Json:
        """Get the balance entry of a single currency.

        This fetches the full summary and picks the matching entry.

        Args:
            currency: Currency code, case-insensitive (e.g. ``"usdt"``)

        Returns:
            Json: The balance entry, or an empty dict when the account holds
                nothing in that currency

        Endpoint:
            private/user-balance

        """
        summary = await self.get_account_summary()
        wanted = currency.upper()
        accounts = summary.get("data") if isinstance(summary, dict) else None
        for account in accounts or []:
            if isinstance(account, dict) and account.get("currency") == wanted:
                return account
        return {}

    async def get_transaction_history(
        self,
        currency: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> Json:
        """Get the account's transaction journal.

        Endpoint:
            private/get-transactions

        """
        params = _history_params(currency, start_ts, end_ts, page_size, page)
        return await self.request(ApiMethod.GET_TRANSACTION_HISTORY, params)  # type: ignore

    async def get_deposit_address(
        self, currency: str, network: str | None = None
    ) -> Json:
        """Get the deposit addresses of a currency.

        Args:
            currency: Currency code (e.g. ``"BTC"``)
            network: Optional network filter (e.g. ``"ETH"``)

        Endpoint:
            private/get-deposit-address

        """
        params = clean_params({"currency": currency.upper(), "network": network})
        return await self.request(ApiMethod.GET_DEPOSIT_ADDRESS, params)  # type: ignore

    async def create_withdrawal(
        self,
        currency: str,
        amount: NumericInput,
        address: str,
        network: str | None = None,
        address_tag: str | None = None,
        client_wid: str | None = None,
    ) -> Json:
        """Request a withdrawal to an external address.

        The address must be whitelisted for the API key.

        Args:
            currency: Currency code (e.g. ``"USDT"``)
            amount: Amount to withdraw
            address: Destination address
            network: Network to withdraw on (optional)
            address_tag: Secondary address identifier such as a memo (optional)
            client_wid: Client-assigned withdrawal id (optional)

        Returns:
            Json: The created withdrawal

        Raises:
            ValidationError: If the amount is not a valid positive number

        Endpoint:
            private/create-withdrawal

        """
        params = clean_params(
            {
                "currency": currency.upper(),
                "amount": numeric_to_str(amount),
                "address": address,
                "network": network,
                "address_tag": address_tag,
                "client_wid": client_wid,
            }
        )
        return await self.request(ApiMethod.CREATE_WITHDRAWAL, params)  # type: ignore

    async def get_withdrawal_history(
        self,
        currency: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
        status: WithdrawalStatus | None = None,
    ) -> Json:
        """Get past withdrawals, optionally filtered by status.

        Endpoint:
            private/get-withdrawal-history

        """
        params = _history_params(
            currency,
            start_ts,
            end_ts,
            page_size,
            page,
            status=status.value if status is not None else None,
        )
        return await self.request(ApiMethod.GET_WITHDRAWAL_HISTORY, params)  # type: ignore

    async def get_deposit_history(
        self,
        currency: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
        status: DepositStatus | None = None,
    ) -> Json:
        """Get past deposits, optionally filtered by status.

        Endpoint:
            private/get-deposit-history

        """
        params = _history_params(
            currency,
            start_ts,
            end_ts,
            page_size,
            page,
            status=status.value if status is not None else None,
        )
        return await self.request(ApiMethod.GET_DEPOSIT_HISTORY, params)  # type: ignore

    ### ------------------------------------------------ Spot Trading ------------------------------------------------

    async def create_order(
        self,
        instrument_name: str,
        side: Side,
        order_type: OrderType,
        quantity: NumericInput,
        price: NumericInput | None = None,
        client_oid: str | None = None,
        time_in_force: TimeInForce | None = None,
        trigger_price: NumericInput | None = None,
        post_only: bool = False,
    ) -> Json:
        """Place an order.

        Args:
            instrument_name: Instrument to trade (e.g. ``"BTC_USDT"``)
            side: BUY or SELL
            order_type: Type of the order
            quantity: Order quantity
            price: Limit price; only sent for LIMIT, STOP_LIMIT and
                TAKE_PROFIT_LIMIT orders
            client_oid: Client-assigned order id (optional)
            time_in_force: GTC, IOC or FOK (optional)
            trigger_price: Trigger price for stop and take-profit orders (optional)
            post_only: Reject the order instead of taking liquidity

        Returns:
            Json: The ``order_id`` and ``client_oid`` of the new order

        Raises:
            ValidationError: If a numeric argument is invalid, or a priced order
                type is given without a price
            ApiError: If the exchange rejects the order

        Example:
            .. code-block:: python

                order = await client.create_order(
                    "BTC_USDT", Side.BUY, OrderType.LIMIT, quantity="0.001", price="50000"
                )
                print(order["order_id"])

        Endpoint:
            private/create-order

        """
        if order_type.is_priced and price is None:
            raise ValidationError(f"{order_type.value} orders require a price")

        params = clean_params(
            {
                "instrument_name": instrument_name,
                "side": side.value,
                "type": order_type.value,
                "quantity": numeric_to_str(quantity),
                "price": numeric_or_none(price) if order_type.is_priced else None,
                "client_oid": client_oid,
                "time_in_force": (
                    time_in_force.value if time_in_force is not None else None
                ),
                "trigger_price": numeric_or_none(trigger_price),
                "exec_inst": "POST_ONLY" if post_only else None,
            }
        )
        return await self.request(ApiMethod.CREATE_ORDER, params)  # type: ignore

    async def cancel_order(self, order_id: str, instrument_name: str) -> Json:
        """Cancel an open order.

        Args:
            order_id: Exchange order id
            instrument_name: Instrument the order was placed on

        Endpoint:
            private/cancel-order

        """
        params: ParamMap = {"order_id": order_id, "instrument_name": instrument_name}
        return await self.request(ApiMethod.CANCEL_ORDER, params)  # type: ignore

    async def cancel_all_orders(self, instrument_name: str | None = None) -> Json:
        """Cancel every open order, or only those of one instrument.

        Endpoint:
            private/cancel-all-orders

        """
        params = clean_params({"instrument_name": instrument_name})
        return await self.request(ApiMethod.CANCEL_ALL_ORDERS, params)  # type: ignore

    async def get_open_orders(
        self,
        instrument_name: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> Json:
        """Get open orders.

        Endpoint:
            private/get-open-orders

        """
        params = _history_params(
            None, start_ts, end_ts, page_size, page, instrument_name=instrument_name
        )
        return await self.request(ApiMethod.GET_OPEN_ORDERS, params)  # type: ignore

    async def get_order_detail(self, order_id: str) -> Json:
        """Get a single order by id.

        Endpoint:
            private/get-order-detail

        """
        params: ParamMap = {"order_id": order_id}
        return await self.request(ApiMethod.GET_ORDER_DETAIL, params)  # type: ignore

    async def get_order_history(
        self,
        instrument_name: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> Json:
        """Get past orders.

        Use ``iter_all_items(ApiMethod.GET_ORDER_HISTORY, "data", ...)`` to walk
        every page.

        Endpoint:
            private/get-order-history

        """
        params = _history_params(
            None, start_ts, end_ts, page_size, page, instrument_name=instrument_name
        )
        return await self.request(ApiMethod.GET_ORDER_HISTORY, params)  # type: ignore

    async def get_trades(
        self,
        instrument_name: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> Json:
        """Get the account's own fills.

        Endpoint:
            private/get-trades

        """
        params = _history_params(
            None, start_ts, end_ts, page_size, page, instrument_name=instrument_name
        )
        return await self.request(ApiMethod.GET_TRADES, params)  # type: ignore

    ### ------------------------------------------------ Derivatives ------------------------------------------------

    async def get_positions(self, instrument_name: str | None = None) -> Json:
        """Get open derivatives positions.

        Endpoint:
            private/get-positions

        """
        params = clean_params({"instrument_name": instrument_name})
        return await self.request(ApiMethod.GET_POSITIONS, params)  # type: ignore

    async def get_position(self, instrument_name: str) -> Json:
        """Get the position of a single instrument.

        Endpoint:
            private/get-positions

        """
        return await self.get_positions(instrument_name)

    async def close_position(
        self,
        instrument_name: str,
        type: OrderType | None = None,
        price: NumericInput | None = None,
    ) -> Json:
        """Close a derivatives position.

        Args:
            instrument_name: Instrument of the position (e.g. ``"BTCUSD-PERP"``)
            type: MARKET or LIMIT (optional, the exchange defaults to MARKET)
            price: Limit price, required by the exchange for LIMIT closes

        Endpoint:
            private/close-position

        """
        params = clean_params(
            {
                "instrument_name": instrument_name,
                "type": type.value if type is not None else None,
                "price": numeric_or_none(price),
            }
        )
        return await self.request(ApiMethod.CLOSE_POSITION, params)  # type: ignore

    async def get_transfer_history(
        self,
        currency: str | None = None,
        direction: TransferDirection | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
    ) -> Json:
        """Get transfers between the spot and derivatives wallets.

        Endpoint:
            private/deriv/get-transfer-history

        """
        params = _history_params(
            currency,
            start_ts,
            end_ts,
            page_size,
            page,
            direction=direction.value if direction is not None else None,
        )
        return await self.request(ApiMethod.GET_TRANSFER_HISTORY, params)  # type: ignore

    async def transfer(
        self, currency: str, amount: NumericInput, direction: TransferDirection
    ) -> Json:
        """Move funds between the spot and derivatives wallets.

        Args:
            currency: Currency code (e.g. ``"USDT"``)
            amount: Amount to move
            direction: SPOT_TO_DERIV or DERIV_TO_SPOT

        Endpoint:
            private/deriv/transfer

        """
        params: ParamMap = {
            "currency": currency.upper(),
            "amount": numeric_to_str(amount),
            "direction": direction.value,
        }
        return await self.request(ApiMethod.TRANSFER, params)  # type: ignore

    ### ------------------------------------------------ Margin ------------------------------------------------

    async def get_margin_account(self, instrument_name: str | None = None) -> Json:
        """Get the margin configuration of the account.

        Endpoint:
            private/margin/get-user-config

        """
        params = clean_params({"instrument_name": instrument_name})
        return await self.request(ApiMethod.GET_MARGIN_ACCOUNT, params)  # type: ignore

    async def borrow(
        self,
        currency: str,
        amount: NumericInput,
        instrument_name: str | None = None,
    ) -> Json:
        """Borrow funds on margin.

        Endpoint:
            private/margin/borrow

        """
        params = clean_params(
            {
                "currency": currency.upper(),
                "amount": numeric_to_str(amount),
                "instrument_name": instrument_name,
            }
        )
        return await self.request(ApiMethod.BORROW, params)  # type: ignore

    async def repay(
        self,
        currency: str,
        amount: NumericInput,
        instrument_name: str | None = None,
    ) -> Json:
        """Repay borrowed funds.

        Endpoint:
            private/margin/repay

        """
        params = clean_params(
            {
                "currency": currency.upper(),
                "amount": numeric_to_str(amount),
                "instrument_name": instrument_name,
            }
        )
        return await self.request(ApiMethod.REPAY, params)  # type: ignore

    async def get_loan_history(
        self,
        currency: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
        instrument_name: str | None = None,
    ) -> Json:
        """Get past margin loans.

        Endpoint:
            private/margin/get-loan-history

        """
        params = _history_params(
            currency, start_ts, end_ts, page_size, page, instrument_name=instrument_name
        )
        return await self.request(ApiMethod.GET_LOAN_HISTORY, params)  # type: ignore

    async def get_interest_history(
        self,
        currency: str | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
        page_size: int | None = None,
        page: int | None = None,
        instrument_name: str | None = None,
    ) -> Json:
        """Get interest charged on margin loans.

        Endpoint:
            private/margin/get-interest-history

        """
        params = _history_params(
            currency, start_ts, end_ts, page_size, page, instrument_name=instrument_name
        )
        return await self.request(ApiMethod.GET_INTEREST_HISTORY, params)  # type: ignore

    async def get_margin_trading_user(self) -> Json:
        """Get the margin trading profile of the account.

        Endpoint:
            private/margin/get-user-config

        """
        return await self.request(ApiMethod.GET_MARGIN_ACCOUNT)  # type: ignore

    ### ------------------------------------------------ Market Data ------------------------------------------------

    async def get_instruments(self, instrument_type: str | None = None) -> Json:
        """Get the tradable instruments.

        Args:
            instrument_type: Optional filter such as ``"CCY_PAIR"`` or ``"PERPETUAL_SWAP"``

        Endpoint:
            public/get-instruments

        """
        params = clean_params({"instrument_type": instrument_type})
        return await self.request(  # type: ignore
            ApiMethod.GET_INSTRUMENTS, params, is_public=True
        )

    async def get_book(self, instrument_name: str, depth: int = 10) -> Json:
        """Get the order book of an instrument.

        Args:
            instrument_name: Instrument (e.g. ``"BTC_USDT"``)
            depth: Levels per side, one of 10, 20, 50, 100 or 150

        Example:
            .. code-block:: python

                book = await client.get_book("BTC_USDT", depth=10)
                best_bid = book["data"][0]["bids"][0]

        Endpoint:
            public/get-book

        """
        params: ParamMap = {"instrument_name": instrument_name, "depth": depth}
        return await self.request(  # type: ignore
            ApiMethod.GET_BOOK, params, is_public=True
        )

    async def get_ticker(self, instrument_name: str) -> Json:
        """Get the ticker of one instrument.

        Endpoint:
            public/get-ticker

        """
        params: ParamMap = {"instrument_name": instrument_name}
        return await self.request(  # type: ignore
            ApiMethod.GET_TICKER, params, is_public=True
        )

    async def get_tickers(self) -> Json:
        """Get the tickers of every instrument.

        Endpoint:
            public/get-tickers

        """
        return await self.request(  # type: ignore
            ApiMethod.GET_TICKERS, is_public=True
        )

    async def get_public_trades(
        self, instrument_name: str, count: int | None = None
    ) -> Json:
        """Get recent market trades of an instrument.

        Endpoint:
            public/get-trades

        """
        params = clean_params({"instrument_name": instrument_name, "count": count})
        return await self.request(  # type: ignore
            ApiMethod.GET_PUBLIC_TRADES, params, is_public=True
        )

    async def get_candlestick(
        self,
        instrument_name: str,
        timeframe: Timeframe,
        count: int | None = None,
        start_ts: TimestampInput | None = None,
        end_ts: TimestampInput | None = None,
    ) -> Json:
        """Get candlesticks (k-lines) of an instrument.

        Args:
            instrument_name: Instrument (e.g. ``"BTC_USDT"``)
            timeframe: Candle period
            count: Number of candles (optional)
            start_ts: Start of the window (optional)
            end_ts: End of the window (optional)

        Endpoint:
            public/get-candlestick

        """
        params = clean_params(
            {
                "instrument_name": instrument_name,
                "timeframe": timeframe.value,
                "count": count,
                "start_ts": timestamp_or_none(start_ts),
                "end_ts": timestamp_or_none(end_ts),
            }
        )
        return await self.request(  # type: ignore
            ApiMethod.GET_CANDLESTICK, params, is_public=True
        )

    async def get_valuations(
        self,
        instrument_name: str | None = None,
        valuation_type: str | None = None,
    ) -> Json:
        """Get index or mark price valuations.

        Endpoint:
            public/get-valuations

        """
        params = clean_params(
            {"instrument_name": instrument_name, "valuation_type": valuation_type}
        )
        return await self.request(  # type: ignore
            ApiMethod.GET_VALUATIONS, params, is_public=True
        )

    ### ------------------------------------------------ Wallet ------------------------------------------------

    async def get_currency_networks(self, currency: str | None = None) -> Json:
        """Get the withdrawal and deposit networks of currencies.

        Endpoint:
            private/get-currency-networks

        """
        params = clean_params({"currency": upper_or_none(currency)})
        return await self.request(  # type: ignore
            ApiMethod.GET_CURRENCY_NETWORKS, params
        )
