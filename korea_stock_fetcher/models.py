from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Quote:
    code: str
    name: str
    price: int
    change: int
    change_rate: str
    open: int
    high: int
    low: int
    volume: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SearchResult:
    code: str
    name: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class RankEntry:
    """
    One row of a ranking table.

    Exactly one of `market_cap` / `volume` is set, as displayed on the page
    (units and separators kept verbatim).
    """

    rank: int
    code: str
    name: str
    price: int
    market_cap: str | None = None
    volume: str | None = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Candle:
    date: str  # YYYYMMDD
    open: int
    high: int
    low: int
    close: int
    volume: int

    def to_dict(self) -> dict:
        return asdict(self)
