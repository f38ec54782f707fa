"""
Public API Example

This example demonstrates how to use the Crypto.com Exchange market data
endpoints. No authentication is required for these endpoints, they are sent
unsigned.

Endpoints covered:
- Instruments
- Order book
- Tickers
- Recent trades
- Candlestick data
- Index and mark price valuations
"""

import asyncio

from cryptocom_exchange import (
    CryptoComApiClient,
    Timeframe,
    get_version,
    print_data,
)

INSTRUMENT = "BTC_USDT"


async def example_public_api() -> None:
    """Demonstrate the public API endpoints without authentication."""

    print("=" * 70)
    print("Crypto.com Exchange Public API Example")
    print("=" * 70)

    ver = get_version()
    print(f"\n[Info] Crypto.com Python SDK Version: {ver}\n")

    # Public calls never need credentials
    print("[Setup] Initializing API client (no authentication needed)...")
    async with CryptoComApiClient() as client:
        # ==================================================================
        # INSTRUMENTS
        # ==================================================================
        print("\n" + "=" * 70)
        print("1. INSTRUMENTS")
        print("=" * 70)

        instruments = await client.get_instruments()
        data = instruments.get("data", [])
        print(f"\n[Instruments] {len(data)} tradable instruments")
        for instrument in data[:5]:
            print(f"  {instrument.get('symbol')}  ({instrument.get('inst_type')})")

        # ==================================================================
        # ORDER BOOK
        # ==================================================================
        print("\n" + "=" * 70)
        print(f"2. ORDER BOOK ({INSTRUMENT})")
        print("=" * 70)

        book = await client.get_book(INSTRUMENT, depth=10)
        levels = book["data"][0] if book.get("data") else {}
        print("\n[Top of book]")
        if levels.get("bids"):
            print(f"  Best bid: {levels['bids'][0]}")
        if levels.get("asks"):
            print(f"  Best ask: {levels['asks'][0]}")

        # ==================================================================
        # TICKER / TRADES / CANDLES
        # ==================================================================
        print("\n" + "=" * 70)
        print("3. MARKET ACTIVITY")
        print("=" * 70)

        print("\n[Ticker]")
        print_data(await client.get_ticker(INSTRUMENT))

        trades = await client.get_public_trades(INSTRUMENT, count=5)
        print("\n[Recent trades]")
        print_data(trades.get("data", []))

        candles = await client.get_candlestick(INSTRUMENT, Timeframe.ONE_HOUR, count=5)
        print("\n[Hourly candles]")
        print_data(candles.get("data", []))

        # ==================================================================
        # VALUATIONS
        # ==================================================================
        print("\n" + "=" * 70)
        print("4. VALUATIONS")
        print("=" * 70)

        valuations = await client.get_valuations("BTCUSD-INDEX", "index_price")
        print_data(valuations)

    print("\n" + "=" * 70)
    print("Example completed successfully!")
    print("=" * 70)
    print(
        "\n[Note] For authenticated endpoints (trading, account info), "
        "see example_rest_api.py\n"
    )


if __name__ == "__main__":
    """
    Run the public API example.

    Usage:
        python example_public_api.py

    No authentication required - this example only uses public endpoints.
    """
    asyncio.run(example_public_api())
