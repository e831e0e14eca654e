"""Failure kinds raised by price sources.

Transport failures (``aiohttp.ClientError``, ``asyncio.TimeoutError``) are
not represented here; they reach the caller unchanged.
"""
from __future__ import annotations

from enum import Enum


class PriceErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    NO_DATA = "no_data"
    MISSING_PRICE = "missing_price"


class PriceSourceError(Exception):
    """A price source could not produce a quote."""

    def __init__(self, kind: PriceErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)
