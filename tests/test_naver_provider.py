"""
Tests for the Naver Finance provider (network replaced by a fake requests.get).
"""
from __future__ import annotations

import asyncio

import pandas as pd
import pytest
import requests

from korea_stock_fetcher.config import FetchConfig
from korea_stock_fetcher.errors import FetchError, ValidationError
from korea_stock_fetcher.models import SearchResult
from korea_stock_fetcher.providers import NaverFinanceProvider

from naver_pages import QUOTE_HTML, SEARCH_HTML, candle_xml, ranking_html


class _DummyResponse:
    def __init__(self, *, text: str = "", status_code: int = 200):
        self.status_code = int(status_code)
        self.text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


class _FakeGet:
    def __init__(self, *, text: str = "", status_code: int = 200, exc: Exception | None = None):
        self._text = text
        self._status_code = status_code
        self._exc = exc
        self.calls: list[dict] = []

    def __call__(self, url, headers=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout})
        if self._exc is not None:
            raise self._exc
        return _DummyResponse(text=self._text, status_code=self._status_code)


@pytest.fixture
def provider():
    return NaverFinanceProvider(config=FetchConfig())


def _patch_get(monkeypatch, fake: _FakeGet) -> _FakeGet:
    monkeypatch.setattr("korea_stock_fetcher.providers.naver_http.requests.get", fake)
    return fake


def test_provider_name(provider):
    assert provider.name == "naver"


def test_get_quote(monkeypatch, provider):
    fake = _patch_get(monkeypatch, _FakeGet(text=QUOTE_HTML))
    q = asyncio.run(provider.get_quote("005930"))
    assert q.price == 70000
    assert q.name == "삼성전자"
    assert fake.calls[0]["url"] == "https://finance.naver.com/item/main.naver?code=005930"
    assert "User-Agent" in fake.calls[0]["headers"]
    assert fake.calls[0]["timeout"] == 10.0


@pytest.mark.parametrize("code", ["5930", "0059301", ""])
def test_invalid_code_fails_without_fetch(monkeypatch, provider, code):
    fake = _patch_get(monkeypatch, _FakeGet(text=QUOTE_HTML))
    with pytest.raises(ValidationError):
        asyncio.run(provider.get_quote(code))
    with pytest.raises(ValidationError):
        asyncio.run(provider.fetch_candles(code, 30))
    assert fake.calls == []


def test_quote_timeout_raises_fetch_error(monkeypatch, provider):
    _patch_get(monkeypatch, _FakeGet(exc=requests.Timeout("Read timed out. (read timeout=10.0)")))
    with pytest.raises(FetchError) as e:
        asyncio.run(provider.get_quote("005930"))
    assert str(e.value).startswith("quote lookup failed")
    assert "timed out" in str(e.value)
    assert e.value.operation == "quote lookup"
    assert isinstance(e.value.__cause__, requests.Timeout)


def test_non_2xx_raises_fetch_error(monkeypatch, provider):
    _patch_get(monkeypatch, _FakeGet(text="", status_code=503))
    with pytest.raises(FetchError) as e:
        asyncio.run(provider.search("카카오"))
    assert "stock search failed" in str(e.value)
    assert "503" in str(e.value)


def test_search_encodes_keyword(monkeypatch, provider):
    fake = _patch_get(monkeypatch, _FakeGet(text=SEARCH_HTML))
    results = asyncio.run(provider.search("카카오"))
    assert results == [SearchResult(code="035720", name="카카오")]
    assert fake.calls[0]["url"] == (
        "https://finance.naver.com/search/searchList.naver?query=%EC%B9%B4%EC%B9%B4%EC%98%A4"
    )


def test_search_requires_keyword(monkeypatch, provider):
    fake = _patch_get(monkeypatch, _FakeGet(text=SEARCH_HTML))
    with pytest.raises(ValidationError):
        asyncio.run(provider.search(""))
    assert fake.calls == []


def test_market_cap_kosdaq(monkeypatch, provider):
    fake = _patch_get(monkeypatch, _FakeGet(text=ranking_html(8)))
    entries = asyncio.run(provider.market_cap_ranking("kosdaq", 5))
    assert len(entries) == 5
    assert [e.rank for e in entries] == [1, 2, 3, 4, 5]
    assert fake.calls[0]["url"] == "https://finance.naver.com/sise/sise_market_sum.naver?sosok=1&page=1"


def test_trading_volume_kospi(monkeypatch, provider):
    fake = _patch_get(monkeypatch, _FakeGet(text=ranking_html(8)))
    entries = asyncio.run(provider.trading_volume_ranking("kospi", 10))
    assert len(entries) == 8
    assert entries[0].volume == "vol1"
    assert fake.calls[0]["url"] == "https://finance.naver.com/sise/sise_quant.naver?sosok=0"


def test_ranking_rejects_bad_limit(monkeypatch, provider):
    fake = _patch_get(monkeypatch, _FakeGet(text=ranking_html(8)))
    with pytest.raises(ValidationError):
        asyncio.run(provider.market_cap_ranking("kospi", 0))
    assert fake.calls == []


def test_fetch_candles(monkeypatch, provider):
    fake = _patch_get(monkeypatch, _FakeGet(text=candle_xml(["20240101|100|110|90|105|500"] * 3)))
    candles = asyncio.run(provider.fetch_candles("005930", 3))
    assert len(candles) == 3
    assert candles[0].date == "20240101"
    assert candles[0].open == 100
    assert candles[0].volume == 500
    call = fake.calls[0]
    assert call["url"] == (
        "https://fchart.stock.naver.com/sise.nhn?symbol=005930&timeframe=day&count=3&requestType=0"
    )
    assert call["headers"]["Referer"] == "https://finance.naver.com/"


def test_fetch_ohlcv_frame(monkeypatch, provider):
    _patch_get(
        monkeypatch,
        _FakeGet(text=candle_xml(["20240102|100|110|90|105|500", "20240103|105|120|100|118|700"])),
    )
    df = asyncio.run(provider.fetch_ohlcv(ticker="005930", days=2))
    assert list(df.columns) == ["Date", "Open", "High", "Low", "Close", "Volume", "Ticker"]
    assert df["Date"].iloc[-1] == pd.Timestamp("2024-01-03")
    assert df["Close"].tolist() == [105, 118]


def test_operations_run_concurrently(monkeypatch, provider):
    _patch_get(monkeypatch, _FakeGet(text=QUOTE_HTML))

    async def _run():
        return await asyncio.gather(*(provider.get_quote(c) for c in ["005930", "000660", "035720"]))

    quotes = asyncio.run(_run())
    assert [q.code for q in quotes] == ["005930", "000660", "035720"]


def test_config_from_env(monkeypatch):
    monkeypatch.setenv("KOREA_STOCK_FINANCE_URL", "http://localhost:8080/")
    monkeypatch.setenv("KOREA_STOCK_USER_AGENT", "test-agent")
    cfg = FetchConfig.from_env()
    assert cfg.finance_base_url == "http://localhost:8080"
    assert cfg.page_headers() == {"User-Agent": "test-agent"}
    assert cfg.chart_base_url == "https://fchart.stock.naver.com"
