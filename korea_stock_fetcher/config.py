"""
Endpoints, request headers and the selector table for Naver Finance.

Selectors are kept in one place so a markup change upstream only needs an
edit here, not in the parsing logic.
"""
from __future__ import annotations

from dataclasses import dataclass
import os


FETCH_TIMEOUT_SECONDS = 10.0

SEARCH_RESULT_LIMIT = 10
DEFAULT_CHART_DAYS = 30
DEFAULT_RANKING_LIMIT = 10
DEFAULT_MARKET = "kospi"
MARKETS = ["kospi", "kosdaq"]

_BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


SELECTORS = {
    "quote_name": ".wrap_company h2 a",
    "quote_price": ".no_today .blind",
    # 1st: change, 2nd: change rate
    "quote_delta": ".no_exday .blind",
    # 1st..4th: open, high, low, volume
    "quote_range": ".rate_info .blind",
    "search_title": ".tltle",
    "ranking_row": "table.type_2 tr",
    "candle_item": "item",
}


@dataclass(frozen=True)
class RankingSpec:
    """How to fetch and read one ranking table."""

    operation: str
    path: str
    value_column: int
    value_field: str


MARKET_CAP_RANKING = RankingSpec(
    operation="market cap ranking",
    path="/sise/sise_market_sum.naver?sosok={sosok}&page=1",
    value_column=6,
    value_field="market_cap",
)

TRADING_VOLUME_RANKING = RankingSpec(
    operation="trading volume ranking",
    path="/sise/sise_quant.naver?sosok={sosok}",
    value_column=5,
    value_field="volume",
)


@dataclass(frozen=True)
class FetchConfig:
    finance_base_url: str = "https://finance.naver.com"
    chart_base_url: str = "https://fchart.stock.naver.com"
    user_agent: str = _BROWSER_USER_AGENT
    chart_user_agent: str = "Mozilla/5.0"
    referer: str = "https://finance.naver.com/"

    @classmethod
    def from_env(cls) -> "FetchConfig":
        defaults = cls()
        return cls(
            finance_base_url=os.environ.get("KOREA_STOCK_FINANCE_URL", defaults.finance_base_url).rstrip("/"),
            chart_base_url=os.environ.get("KOREA_STOCK_CHART_URL", defaults.chart_base_url).rstrip("/"),
            user_agent=os.environ.get("KOREA_STOCK_USER_AGENT", defaults.user_agent),
        )

    def page_headers(self) -> dict:
        return {"User-Agent": self.user_agent}

    def chart_headers(self) -> dict:
        return {"User-Agent": self.chart_user_agent, "Referer": self.referer}
