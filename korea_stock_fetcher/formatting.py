"""
Plain-text rendering of records for the tool channel.

Layout only; records are produced elsewhere.
"""
from __future__ import annotations

from .models import Candle, Quote, RankEntry, SearchResult


CHART_RECENT_DAYS = 5


def format_quote(q: Quote) -> str:
    sign = "+" if q.change >= 0 else ""
    lines = [
        f"📊 {q.name} ({q.code})",
        "",
        f"현재가: {q.price:,}원",
        f"전일대비: {sign}{q.change:,}원 ({q.change_rate})",
        f"시가: {q.open:,}원",
        f"고가: {q.high:,}원",
        f"저가: {q.low:,}원",
        f"거래량: {q.volume:,}주",
    ]
    return "\n".join(lines) + "\n"


def format_search_results(keyword: str, results: list[SearchResult]) -> str:
    if not results:
        return f"❌ '{keyword}'와 일치하는 종목을 찾을 수 없습니다."
    lines = [f"🔍 '{keyword}' 검색 결과", ""]
    lines += [f"{r.code}: {r.name}" for r in results]
    return "\n".join(lines) + "\n"


def format_date(yyyymmdd: str) -> str:
    return f"{yyyymmdd[:4]}-{yyyymmdd[4:6]}-{yyyymmdd[6:8]}"


def format_chart(code: str, days: int, candles: list[Candle]) -> str:
    recent = candles[-CHART_RECENT_DAYS:]
    lines = [
        f"📈 {code} 일봉 차트 (최근 {days}일 중 최근 {CHART_RECENT_DAYS}일)",
        "",
        "날짜     | 시가   | 고가   | 저가   | 종가   | 거래량",
        "-" * 60,
    ]
    for c in recent:
        lines.append(
            f"{format_date(c.date)} | {c.open:>6,} | {c.high:>6,} | {c.low:>6,} | {c.close:>6,} | {c.volume:,}"
        )
    return "\n".join(lines) + "\n"


def format_ranking(title: str, limit: int, entries: list[RankEntry], *, value_header: str) -> str:
    lines = [
        f"{title} (상위 {limit}개)",
        "",
        f"순위 | 종목코드 | 종목명              | 현재가      | {value_header}",
        "-" * 70,
    ]
    for e in entries:
        value = e.market_cap if e.market_cap is not None else (e.volume or "")
        lines.append(f"{e.rank:>3} | {e.code} | {e.name:<18} | {e.price:>9,} | {value}")
    return "\n".join(lines) + "\n"


def format_market_cap(market: str, limit: int, entries: list[RankEntry]) -> str:
    return format_ranking(f"💰 {market.upper()} 시가총액 순위", limit, entries, value_header="시가총액")


def format_trading_volume(market: str, limit: int, entries: list[RankEntry]) -> str:
    return format_ranking(f"📊 {market.upper()} 거래량 순위", limit, entries, value_header="거래량")


def format_error(message: str) -> str:
    return f"❌ 오류 발생: {message}"
