"""
Tool surface: declared parameter schemas and the dispatch boundary.

`call_tool` is the only place operation errors are caught. Every failure is
turned into a flagged text result so the tool channel stays usable for the
next call.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Awaitable, Callable

from .config import DEFAULT_CHART_DAYS, DEFAULT_MARKET, DEFAULT_RANKING_LIMIT, MARKETS
from .errors import KoreaStockError, NoDataError, ValidationError
from .formatting import (
    format_chart,
    format_error,
    format_market_cap,
    format_quote,
    format_search_results,
    format_trading_volume,
)
from .normalize import validate_code, validate_keyword, validate_positive_int
from .provider import MarketDataProvider

logger = logging.getLogger(__name__)


_MARKET_PROPERTIES = {
    "market": {
        "type": "string",
        "description": "시장 (kospi 또는 kosdaq)",
        "enum": MARKETS,
        "default": DEFAULT_MARKET,
    },
    "limit": {
        "type": "integer",
        "description": f"조회할 종목 수 (기본값: {DEFAULT_RANKING_LIMIT})",
        "default": DEFAULT_RANKING_LIMIT,
    },
}

TOOL_SPECS: list[dict] = [
    {
        "name": "get_stock_price",
        "description": "특정 종목의 현재가 정보를 조회합니다. 6자리 종목 코드를 입력하세요.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "code": {"type": "string", "description": "종목 코드 (6자리, 예: 005930=삼성전자)"},
            },
            "required": ["code"],
        },
    },
    {
        "name": "search_stock",
        "description": "종목명으로 종목 코드를 검색합니다.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "keyword": {"type": "string", "description": "검색할 종목명 (예: 삼성전자, 카카오)"},
            },
            "required": ["keyword"],
        },
    },
    {
        "name": "get_stock_chart",
        "description": "특정 종목의 일봉 차트 데이터를 조회합니다.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "code": {"type": "string", "description": "종목 코드 (6자리)"},
                "days": {
                    "type": "integer",
                    "description": f"조회할 일수 (기본값: {DEFAULT_CHART_DAYS}일)",
                    "default": DEFAULT_CHART_DAYS,
                },
            },
            "required": ["code"],
        },
    },
    {
        "name": "get_market_cap",
        "description": "시가총액 순위를 조회합니다.",
        "inputSchema": {"type": "object", "properties": dict(_MARKET_PROPERTIES)},
    },
    {
        "name": "get_trading_volume",
        "description": "거래량 순위를 조회합니다.",
        "inputSchema": {"type": "object", "properties": dict(_MARKET_PROPERTIES)},
    },
]


@dataclass(frozen=True)
class ToolResult:
    text: str
    is_error: bool = False


Handler = Callable[[MarketDataProvider, dict], Awaitable[str]]


async def _get_stock_price(provider: MarketDataProvider, args: dict) -> str:
    code = validate_code(args.get("code"))
    return format_quote(await provider.get_quote(code))


async def _search_stock(provider: MarketDataProvider, args: dict) -> str:
    keyword = validate_keyword(args.get("keyword"))
    return format_search_results(keyword, await provider.search(keyword))


async def _get_stock_chart(provider: MarketDataProvider, args: dict) -> str:
    code = validate_code(args.get("code"))
    days = validate_positive_int(args.get("days") or DEFAULT_CHART_DAYS, name="days")
    candles = await provider.fetch_candles(code, days)
    if not candles:
        raise NoDataError(f"no chart data available for {code}")
    return format_chart(code, days, candles)


def _ranking_args(args: dict) -> tuple[str, int]:
    market = str(args.get("market") or DEFAULT_MARKET)
    limit = validate_positive_int(args.get("limit") or DEFAULT_RANKING_LIMIT, name="limit")
    return market, limit


async def _get_market_cap(provider: MarketDataProvider, args: dict) -> str:
    market, limit = _ranking_args(args)
    return format_market_cap(market, limit, await provider.market_cap_ranking(market, limit))


async def _get_trading_volume(provider: MarketDataProvider, args: dict) -> str:
    market, limit = _ranking_args(args)
    return format_trading_volume(market, limit, await provider.trading_volume_ranking(market, limit))


_HANDLERS: dict[str, Handler] = {
    "get_stock_price": _get_stock_price,
    "search_stock": _search_stock,
    "get_stock_chart": _get_stock_chart,
    "get_market_cap": _get_market_cap,
    "get_trading_volume": _get_trading_volume,
}


async def call_tool(name: str, arguments: dict[str, Any] | None, *, provider: MarketDataProvider) -> ToolResult:
    """Run one tool call; never raises."""
    try:
        handler = _HANDLERS.get(name)
        if handler is None:
            raise ValidationError(f"Unknown tool: {name}")
        text = await handler(provider, dict(arguments or {}))
        return ToolResult(text=text)
    except KoreaStockError as e:
        logger.warning(f"{name}: {e}")
        return ToolResult(text=format_error(str(e)), is_error=True)
    except Exception as e:
        logger.exception(f"{name}: unexpected error")
        return ToolResult(text=format_error(f"{type(e).__name__}: {e}"), is_error=True)
