from __future__ import annotations

import pandas as pd

from .models import Candle


_CANDLE_RENAME_MAP = {
    "date": "Date",
    "open": "Open",
    "high": "High",
    "low": "Low",
    "close": "Close",
    "volume": "Volume",
}


def candles_to_frame(candles: list[Candle], *, ticker: str) -> pd.DataFrame:
    """
    Convert extracted candles into the project's canonical OHLCV schema.

    Canonical columns:
      Date, Open, High, Low, Close, Volume, Ticker

    Notes:
    - Fails early on empty input; callers decide how to handle it.
    - Zero-valued fields (degraded on extraction) are kept as-is.
    """
    if not candles:
        raise ValueError("candles is empty")

    df = pd.DataFrame([c.to_dict() for c in candles]).rename(columns=_CANDLE_RENAME_MAP)

    df["Date"] = pd.to_datetime(df["Date"], format="%Y%m%d", errors="raise")
    df["Ticker"] = str(ticker).strip().zfill(6)

    # Korean stock prices fit int32; volume does not always.
    for c in ["Open", "High", "Low", "Close"]:
        df[c] = df[c].astype("int32")
    df["Volume"] = df["Volume"].astype("int64")

    df = df.sort_values("Date", kind="stable")
    # Enforce one row per date (keep last) to avoid downstream index collisions.
    df = df.drop_duplicates(subset=["Date"], keep="last").reset_index(drop=True)

    cols = ["Date", "Open", "High", "Low", "Close", "Volume", "Ticker"]
    return df[cols].copy()
