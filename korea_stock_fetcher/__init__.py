"""
korea_stock_fetcher

Korean equity market data (quotes, rankings, daily candles, name search)
scraped from Naver Finance into typed records.

Design goals:
- Single provider interface (swap the scraping source easily)
- Degrade field-by-field on shifted markup, never crash on it
- Minimal exception catching (catch only at the tool/CLI boundary)
- Readability first
"""

from .models import Candle, Quote, RankEntry, SearchResult
from .errors import FetchError, KoreaStockError, NoDataError, ValidationError

__all__ = [
    "Candle",
    "Quote",
    "RankEntry",
    "SearchResult",
    "FetchError",
    "KoreaStockError",
    "NoDataError",
    "ValidationError",
]
