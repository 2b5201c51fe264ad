from __future__ import annotations

from typing import Protocol

import pandas as pd

from .models import Candle, Quote, RankEntry, SearchResult


class MarketDataProvider(Protocol):
    """
    Single provider contract.

    A provider is responsible for supplying:
    - current quote of one instrument
    - name search
    - capitalization / traded volume rankings (one page)
    - daily candles

    Every operation is a coroutine and keeps no state between calls.
    """

    name: str

    async def get_quote(self, code: str) -> Quote:
        """Current quote for a 6-character instrument code."""

    async def search(self, keyword: str) -> list[SearchResult]:
        """At most 10 matches, in the source's listing order."""

    async def market_cap_ranking(self, market: str = "kospi", limit: int = 10) -> list[RankEntry]:
        """Top `limit` instruments by market capitalization."""

    async def trading_volume_ranking(self, market: str = "kospi", limit: int = 10) -> list[RankEntry]:
        """Top `limit` instruments by traded volume."""

    async def fetch_candles(self, code: str, days: int = 30) -> list[Candle]:
        """Daily candles, oldest first. May be shorter than `days`."""

    async def fetch_ohlcv(self, *, ticker: str, days: int = 30) -> pd.DataFrame:
        """Daily candles as the canonical OHLCV frame (see standardize)."""
