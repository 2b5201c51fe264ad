"""
Normalization shared by every extractor.

Locale-formatted text ("70,000", "+1.23%") is turned into plain values here.
Numeric parsing never raises: unparseable text falls back to a default.
"""
from __future__ import annotations

import datetime as dt
import re

from .errors import ValidationError


CODE_LENGTH = 6

_CODE_PARAM_RE = re.compile(r"code=([0-9]+)")
_LEADING_INT_RE = re.compile(r"[+-]?[0-9]+")
_CODE_RE = re.compile(r"[0-9A-Za-z]{6}")
_DATE_RE = re.compile(r"[0-9]{8}")


def strip_separators(text: str | None) -> str:
    if text is None:
        return ""
    return str(text).strip().replace(",", "")


def parse_int_or_default(text: str | None, default: int = 0) -> int:
    """
    Parse the leading integer of `text` after removing thousands separators.

    "70,000" -> 70000, "105.0" -> 105, "" / None / "-" -> default.
    """
    m = _LEADING_INT_RE.match(strip_separators(text))
    if m is None:
        return default
    return int(m.group(0))


def extract_code(href: str | None) -> str | None:
    """Digit-only `code=` query parameter of a link, if any."""
    if not href:
        return None
    m = _CODE_PARAM_RE.search(href)
    return m.group(1) if m else None


def normalize_date(text: str | None) -> str | None:
    """First 8 characters as YYYYMMDD, or None when not a calendar date."""
    s = (text or "").strip()[:8]
    if not _DATE_RE.fullmatch(s):
        return None
    try:
        dt.datetime.strptime(s, "%Y%m%d")
    except ValueError:
        return None
    return s


def validate_code(code: object) -> str:
    s = "" if code is None else str(code).strip()
    if len(s) != CODE_LENGTH:
        raise ValidationError(f"instrument code must be exactly {CODE_LENGTH} characters (e.g. 005930): {code!r}")
    if not _CODE_RE.fullmatch(s):
        raise ValidationError(f"instrument code must be letters/digits only: {code!r}")
    return s.upper()


def validate_keyword(keyword: object) -> str:
    s = "" if keyword is None else str(keyword).strip()
    if not s:
        raise ValidationError("search keyword is required")
    return s


def validate_positive_int(value: object, *, name: str) -> int:
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be a positive integer: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{name} must be a whole number: {value!r}")
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{name} must be a positive integer: {value!r}") from None
    if n <= 0:
        raise ValidationError(f"{name} must be a positive integer: {value!r}")
    return n


def market_param(market: str | None) -> str:
    """Naver `sosok` value: 0 = KOSPI, 1 = anything else (KOSDAQ)."""
    return "0" if str(market or "").strip().lower() == "kospi" else "1"
