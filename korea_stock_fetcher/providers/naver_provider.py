"""
Naver Finance data provider.

Scrapes the public finance.naver.com pages and the fchart XML feed; there is
no official API, so markup changes upstream degrade fields to defaults.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from urllib.parse import quote

import pandas as pd

from ..config import (
    DEFAULT_CHART_DAYS,
    DEFAULT_MARKET,
    DEFAULT_RANKING_LIMIT,
    MARKET_CAP_RANKING,
    TRADING_VOLUME_RANKING,
    FetchConfig,
    RankingSpec,
)
from ..models import Candle, Quote, RankEntry, SearchResult
from ..normalize import market_param, validate_code, validate_keyword, validate_positive_int
from ..parsers import parse_candles, parse_quote, parse_ranking, parse_search_results
from ..provider import MarketDataProvider
from ..standardize import candles_to_frame
from .naver_http import fetch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NaverFinanceProvider(MarketDataProvider):
    """
    MarketDataProvider implementation backed by Naver Finance:
    - quote / search / rankings: finance.naver.com HTML pages
    - candles: fchart.stock.naver.com XML feed

    Input is validated before any request is made.
    """

    config: FetchConfig = field(default_factory=FetchConfig)
    name: str = "naver"

    async def get_quote(self, code: str) -> Quote:
        code = validate_code(code)
        url = f"{self.config.finance_base_url}/item/main.naver?code={code}"
        html = await fetch(url, headers=self.config.page_headers(), operation="quote lookup")
        return parse_quote(html, code)

    async def search(self, keyword: str) -> list[SearchResult]:
        keyword = validate_keyword(keyword)
        url = f"{self.config.finance_base_url}/search/searchList.naver?query={quote(keyword, safe='')}"
        html = await fetch(url, headers=self.config.page_headers(), operation="stock search")
        return parse_search_results(html)

    async def market_cap_ranking(
        self,
        market: str = DEFAULT_MARKET,
        limit: int = DEFAULT_RANKING_LIMIT,
    ) -> list[RankEntry]:
        return await self._ranking(MARKET_CAP_RANKING, market=market, limit=limit)

    async def trading_volume_ranking(
        self,
        market: str = DEFAULT_MARKET,
        limit: int = DEFAULT_RANKING_LIMIT,
    ) -> list[RankEntry]:
        return await self._ranking(TRADING_VOLUME_RANKING, market=market, limit=limit)

    async def _ranking(self, ranking: RankingSpec, *, market: str, limit: int) -> list[RankEntry]:
        limit = validate_positive_int(limit, name="limit")
        path = ranking.path.format(sosok=market_param(market))
        url = f"{self.config.finance_base_url}{path}"
        html = await fetch(url, headers=self.config.page_headers(), operation=ranking.operation)
        return parse_ranking(html, ranking=ranking, limit=limit)

    async def fetch_candles(self, code: str, days: int = DEFAULT_CHART_DAYS) -> list[Candle]:
        code = validate_code(code)
        days = validate_positive_int(days, name="days")
        url = (
            f"{self.config.chart_base_url}/sise.nhn"
            f"?symbol={code}&timeframe=day&count={days}&requestType=0"
        )
        xml = await fetch(url, headers=self.config.chart_headers(), operation="chart lookup")
        candles = parse_candles(xml)
        if len(candles) < days:
            logger.debug(f"chart lookup: requested {days} days for {code}, feed returned {len(candles)}")
        return candles

    async def fetch_ohlcv(self, *, ticker: str, days: int = DEFAULT_CHART_DAYS) -> pd.DataFrame:
        """
        Daily candles as a DataFrame with columns
        Date, Open, High, Low, Close, Volume, Ticker.

        Raises ValueError when the feed has no usable rows.
        """
        candles = await self.fetch_candles(ticker, days)
        return candles_to_frame(candles, ticker=ticker)
