"""
Extractors: raw Naver Finance markup -> records.

Pure functions (no I/O). Every fragment goes through `normalize`; a missing
or shifted fragment degrades that single field, never the whole call.
"""
from __future__ import annotations

import logging
import warnings

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from .config import SELECTORS, SEARCH_RESULT_LIMIT, RankingSpec
from .models import Candle, Quote, RankEntry, SearchResult
from .normalize import extract_code, normalize_date, parse_int_or_default, strip_separators

logger = logging.getLogger(__name__)


def _soup(markup: str) -> BeautifulSoup:
    return BeautifulSoup(markup or "", "html.parser")


def _xml_soup(markup: str) -> BeautifulSoup:
    # flat feed: tag and attribute lookups only
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
        return _soup(markup)


def nth_text(soup: BeautifulSoup, selector_key: str, n: int = 0) -> str | None:
    """Text of the n-th (0-based) node matching a named selector, or None."""
    nodes = soup.select(SELECTORS[selector_key], limit=n + 1)
    if len(nodes) <= n:
        return None
    return nodes[n].get_text(strip=True)


def parse_quote(html: str, code: str) -> Quote:
    soup = _soup(html)
    return Quote(
        code=code,
        name=nth_text(soup, "quote_name") or "",
        price=parse_int_or_default(nth_text(soup, "quote_price")),
        change=parse_int_or_default(nth_text(soup, "quote_delta", 0)),
        change_rate=nth_text(soup, "quote_delta", 1) or "0%",
        open=parse_int_or_default(nth_text(soup, "quote_range", 0)),
        high=parse_int_or_default(nth_text(soup, "quote_range", 1)),
        low=parse_int_or_default(nth_text(soup, "quote_range", 2)),
        volume=parse_int_or_default(nth_text(soup, "quote_range", 3)),
    )


def parse_search_results(html: str, *, limit: int = SEARCH_RESULT_LIMIT) -> list[SearchResult]:
    results: list[SearchResult] = []
    for node in _soup(html).select(SELECTORS["search_title"]):
        if len(results) >= limit:
            break
        code = extract_code(node.get("href"))
        name = node.get_text(strip=True)
        if not code or not name:
            continue
        results.append(SearchResult(code=code, name=name))
    logger.debug(f"search: parsed {len(results)} results")
    return results


def parse_ranking(html: str, *, ranking: RankingSpec, limit: int) -> list[RankEntry]:
    """
    Read up to `limit` rows of a ranking table.

    Header/separator rows (fewer than 2 cells) and rows without a rank, name or
    code are skipped and do not count toward the limit.
    """
    entries: list[RankEntry] = []
    for row in _soup(html).select(SELECTORS["ranking_row"]):
        if len(entries) >= limit:
            break
        cells = row.find_all("td")
        if len(cells) < 2:
            continue

        rank = parse_int_or_default(cells[0].get_text(strip=True))
        link = cells[1].find("a")
        if link is None:
            continue
        name = link.get_text(strip=True)
        code = extract_code(link.get("href"))
        if not rank or not name or not code:
            continue

        price_text = cells[2].get_text(strip=True) if len(cells) > 2 else ""
        col = ranking.value_column
        value = cells[col].get_text(strip=True) if len(cells) > col else ""
        entries.append(
            RankEntry(
                rank=rank,
                code=code,
                name=name,
                price=parse_int_or_default(price_text),
                **{ranking.value_field: value},
            )
        )
    logger.debug(f"{ranking.operation}: parsed {len(entries)} rows")
    return entries


def parse_candles(xml: str) -> list[Candle]:
    """
    Daily candles from the chart feed, in feed order.

    Each `<item data="YYYYMMDD|open|high|low|close|volume"/>` becomes one
    candle. Items without `data` or without a valid date are skipped.
    """
    candles: list[Candle] = []
    for item in _xml_soup(xml).select(SELECTORS["candle_item"]):
        data = item.get("data")
        if not data:
            continue
        fields = strip_separators(data).split("|")
        fields += [""] * (6 - len(fields))
        date = normalize_date(fields[0])
        # every emitted candle carries a real YYYYMMDD date
        if date is None:
            logger.debug(f"candles: skipping item with invalid date {fields[0]!r}")
            continue
        candles.append(
            Candle(
                date=date,
                open=parse_int_or_default(fields[1]),
                high=parse_int_or_default(fields[2]),
                low=parse_int_or_default(fields[3]),
                close=parse_int_or_default(fields[4]),
                volume=parse_int_or_default(fields[5]),
            )
        )
    logger.debug(f"candles: parsed {len(candles)} items")
    return candles
