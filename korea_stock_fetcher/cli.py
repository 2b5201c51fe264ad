from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv

from .config import DEFAULT_CHART_DAYS, DEFAULT_MARKET, DEFAULT_RANKING_LIMIT, MARKETS, FetchConfig
from .providers import NaverFinanceProvider
from .tools import call_tool

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="korea-stock", description="Korean stock data from Naver Finance")
    sub = p.add_subparsers(dest="command")

    sub.add_parser("serve", help="Run the MCP server on stdio (default)")

    price = sub.add_parser("price", help="Current quote")
    price.add_argument("code", help="6-character instrument code, e.g. 005930")

    search = sub.add_parser("search", help="Search instruments by name")
    search.add_argument("keyword")

    chart = sub.add_parser("chart", help="Daily candles (last 5 shown)")
    chart.add_argument("code")
    chart.add_argument("--days", type=int, default=DEFAULT_CHART_DAYS)

    for cmd, help_text in [("market-cap", "Market capitalization ranking"), ("volume", "Trading volume ranking")]:
        r = sub.add_parser(cmd, help=help_text)
        r.add_argument("--market", choices=MARKETS, default=DEFAULT_MARKET)
        r.add_argument("--limit", type=int, default=DEFAULT_RANKING_LIMIT)

    return p


def _tool_call(args: argparse.Namespace) -> tuple[str, dict]:
    if args.command == "price":
        return "get_stock_price", {"code": args.code}
    if args.command == "search":
        return "search_stock", {"keyword": args.keyword}
    if args.command == "chart":
        return "get_stock_chart", {"code": args.code, "days": args.days}
    if args.command == "market-cap":
        return "get_market_cap", {"market": args.market, "limit": args.limit}
    return "get_trading_volume", {"market": args.market, "limit": args.limit}


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    # stdout is reserved for the MCP channel / tool output.
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get("KOREA_STOCK_LOG_LEVEL", "INFO").upper(),
        format="%(levelname)s: %(message)s",
    )
    args = _build_parser().parse_args(argv)
    provider = NaverFinanceProvider(config=FetchConfig.from_env())

    if args.command in (None, "serve"):
        from .server import serve

        asyncio.run(serve(provider))
        return 0

    name, arguments = _tool_call(args)
    result = asyncio.run(call_tool(name, arguments, provider=provider))
    print(result.text)
    return 1 if result.is_error else 0
