"""
Example usage of NaverFinanceProvider.

This script demonstrates the five operations and the candle DataFrame.
"""
import asyncio

from korea_stock_fetcher import FetchError
from korea_stock_fetcher.providers import NaverFinanceProvider


async def main() -> None:
    provider = NaverFinanceProvider()

    print("Searching for '카카오'...")
    for r in await provider.search("카카오"):
        print(f"  {r.code}: {r.name}")

    print("\nQuote for Samsung Electronics (005930)...")
    quote = await provider.get_quote("005930")
    print(f"  {quote.name}: {quote.price:,}원 ({quote.change_rate})")

    print("\nTop 5 KOSDAQ by market cap...")
    for e in await provider.market_cap_ranking("kosdaq", 5):
        print(f"  {e.rank:>2} {e.code} {e.name} {e.market_cap}")

    print("\nTop 5 KOSPI by traded volume...")
    for e in await provider.trading_volume_ranking("kospi", 5):
        print(f"  {e.rank:>2} {e.code} {e.name} {e.volume}")

    print("\nLast 30 daily candles for 005930 as a DataFrame...")
    df = await provider.fetch_ohlcv(ticker="005930", days=30)
    print(f"Data shape: {df.shape}")
    print(df.tail())


try:
    asyncio.run(main())
except FetchError as e:
    print(f"Error fetching data: {e}")
    print("Note: This may fail in sandboxed environments without internet access.")
