"""
HTTP access to Naver Finance.

One GET per call: no session reuse, no retry, no cache. The blocking request
runs in a worker thread so operations can be awaited concurrently.

The `requests` timeout bounds the connect and each socket read separately,
not the whole transfer: a server that trickles the body can exceed 10 s.
"""
from __future__ import annotations

import asyncio
import logging

import requests

from ..config import FETCH_TIMEOUT_SECONDS
from ..errors import FetchError

logger = logging.getLogger(__name__)


def get_text(url: str, *, headers: dict, timeout_seconds: float = FETCH_TIMEOUT_SECONDS) -> str:
    res = requests.get(url, headers=headers, timeout=timeout_seconds)
    res.raise_for_status()
    return res.text


async def fetch(
    url: str,
    *,
    headers: dict,
    operation: str,
    timeout_seconds: float = FETCH_TIMEOUT_SECONDS,
) -> str:
    """Return the response body, or raise FetchError labelled with `operation`."""
    logger.debug(f"{operation}: GET {url}")
    try:
        return await asyncio.to_thread(get_text, url, headers=headers, timeout_seconds=timeout_seconds)
    except requests.RequestException as e:
        raise FetchError(operation=operation, url=url, cause=e) from e
