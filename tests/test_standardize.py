import pytest
import pandas as pd

from korea_stock_fetcher.models import Candle
from korea_stock_fetcher.standardize import candles_to_frame


def test_candles_to_frame():
    candles = [
        Candle("20250103", 110, 115, 105, 112, 2000),
        Candle("20250102", 100, 120, 90, 110, 1000),
        Candle("20250103", 111, 116, 106, 113, 2100),
    ]
    out = candles_to_frame(candles, ticker="5930")  # will zfill
    assert list(out.columns) == ["Date", "Open", "High", "Low", "Close", "Volume", "Ticker"]
    assert out["Ticker"].unique().tolist() == ["005930"]
    assert out["Date"].iloc[0] == pd.Timestamp("2025-01-02")
    # one row per date, last one wins
    assert len(out) == 2
    assert out["Close"].iloc[-1] == 113


def test_candles_to_frame_raises_on_empty():
    with pytest.raises(ValueError):
        candles_to_frame([], ticker="000000")
