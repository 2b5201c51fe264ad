from __future__ import annotations


class KoreaStockError(Exception):
    """Base class for errors surfaced by an operation."""


class ValidationError(KoreaStockError, ValueError):
    """Caller input is malformed; raised before any request is made."""


class NoDataError(KoreaStockError):
    """The upstream source returned no usable rows."""


class FetchError(KoreaStockError, RuntimeError):
    def __init__(self, *, operation: str, url: str, cause: Exception):
        super().__init__(f"{operation} failed: {cause}")
        self.operation = operation
        self.url = url
        self.__cause__ = cause
