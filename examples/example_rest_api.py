"""
Authenticated REST API Example

This example demonstrates the signed Crypto.com Exchange endpoints. They
require valid API credentials and allow you to:

Account Information:
- Get the balance summary and a single currency balance
- Get transaction, deposit and withdrawal history

Trading Operations:
- Place a post-only limit order far from the market
- Look it up, list open orders, and cancel it
- Walk the whole order history page by page

Derivatives:
- List open positions

Environment Variables Required:
- CRYPTOCOM_API_ENDPOINT_<ENV>: API endpoint URL
- CRYPTOCOM_API_KEY_<ENV>: Your API key
- CRYPTOCOM_API_SECRET_<ENV>: Your API secret
"""

import asyncio
import logging

from cryptocom_exchange import (
    ApiError,
    ApiMethod,
    CryptoComApiClient,
    OrderType,
    Side,
    TimeInForce,
    print_data,
)
from cryptocom_exchange.env_setup import setup_environment

INSTRUMENT = "BTC_USDT"


async def example_auth_rest_api() -> None:
    """Demonstrate authenticated REST API endpoints for trading and account management."""

    print("=" * 70)
    print("Crypto.com Exchange Authenticated REST API Example")
    print("=" * 70)

    print("\n[Setup] Loading credentials from environment...")
    api_endpoint, api_key, api_secret = setup_environment()
    print(f"[Setup] API Endpoint: {api_endpoint}\n")

    async with CryptoComApiClient(
        api_url=api_endpoint, api_key=api_key, api_secret=api_secret, timeout=10.0
    ) as client:
        # ==================================================================
        # PART 1: ACCOUNT INFORMATION
        # ==================================================================
        print("\n" + "=" * 70)
        print("PART 1: ACCOUNT INFORMATION")
        print("=" * 70)

        summary = await client.get_account_summary()
        print("\n[Account Summary]")
        print_data(summary)

        usdt = await client.get_account_balance("USDT")
        print(f"\n[USDT Balance] {usdt or 'no USDT held'}")

        deposits = await client.get_deposit_history(page_size=5, page=0)
        print("\n[Recent Deposits]")
        print_data(deposits)

        withdrawals = await client.get_withdrawal_history(page_size=5, page=0)
        print("\n[Recent Withdrawals]")
        print_data(withdrawals)

        # ==================================================================
        # PART 2: TRADING
        # ==================================================================
        print("\n" + "=" * 70)
        print("PART 2: TRADING")
        print("=" * 70)

        book = await client.get_book(INSTRUMENT, depth=10)
        best_bid = book["data"][0]["bids"][0][0]
        # far below the market so it rests on the book
        price = f"{float(best_bid) * 0.5:.2f}"

        try:
            order = await client.create_order(
                INSTRUMENT,
                Side.BUY,
                OrderType.LIMIT,
                quantity="0.0001",
                price=price,
                time_in_force=TimeInForce.GOOD_TILL_CANCEL,
                post_only=True,
            )
        except ApiError as e:
            print(f"\n[Order rejected] {e.code}: {e.message}")
        else:
            order_id = order["order_id"]
            print(f"\n[Order placed] id={order_id} price={price}")

            print("\n[Order detail]")
            print_data(await client.get_order_detail(order_id))

            print("\n[Open orders]")
            print_data(await client.get_open_orders(INSTRUMENT))

            await client.cancel_order(order_id, INSTRUMENT)
            print(f"\n[Order cancelled] id={order_id}")

        print("\n[Order history, all pages]")
        count = 0
        async for historical in client.iter_all_items(
            ApiMethod.GET_ORDER_HISTORY, "data", {"instrument_name": INSTRUMENT}
        ):
            count += 1
            if count <= 3:
                print_data(historical)
        print(f"  {count} orders in total")

        # ==================================================================
        # PART 3: DERIVATIVES
        # ==================================================================
        print("\n" + "=" * 70)
        print("PART 3: DERIVATIVES")
        print("=" * 70)

        positions = await client.get_positions()
        print("\n[Open Positions]")
        print_data(positions)

    print("\n" + "=" * 70)
    print("EXAMPLE COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(example_auth_rest_api())
