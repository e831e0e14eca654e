"""Request and response handling shared by the pair-envelope price sources.

Both sources expect the DexScreener response shape::

    {"pairs": [{"priceUsd": "1.23", ...}, ...], ...}

Only the first pair is consulted.
"""
from __future__ import annotations

import asyncio
import json
import logging
import re
import ssl
from typing import Any

import aiohttp
import certifi

from ..errors import PriceErrorKind, PriceSourceError

logger = logging.getLogger(__name__)

# Plain decimal or exponent notation, plus inf/nan; no whitespace or digit separators
_PRICE_RE = re.compile(
    r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?|[+-]?(inf|infinity|nan)",
    re.IGNORECASE | re.ASCII,
)


def parse_price_envelope(body: bytes) -> float:
    """Extract ``pairs[0].priceUsd`` from a raw response body.

    Raises:
        PriceSourceError: ``no_data`` for an empty or undecodable body,
            ``missing_price`` when the body decodes but carries no usable price.
    """
    if not body:
        raise PriceSourceError(PriceErrorKind.NO_DATA, "empty response body")

    try:
        payload: Any = json.loads(body)
    except ValueError as e:
        raise PriceSourceError(PriceErrorKind.NO_DATA, "undecodable response body") from e

    pairs = payload.get("pairs") if isinstance(payload, dict) else None
    if not isinstance(pairs, list) or not pairs:
        raise PriceSourceError(PriceErrorKind.MISSING_PRICE, "no pairs in response")

    first = pairs[0]
    price_usd = first.get("priceUsd") if isinstance(first, dict) else None
    if not isinstance(price_usd, str):
        raise PriceSourceError(PriceErrorKind.MISSING_PRICE, "first pair has no priceUsd")

    if not _PRICE_RE.fullmatch(price_usd):
        raise PriceSourceError(
            PriceErrorKind.MISSING_PRICE, f"unparseable priceUsd {price_usd!r}"
        )

    return float(price_usd)


async def _get_body(
    session: aiohttp.ClientSession, url: str, timeout: aiohttp.ClientTimeout
) -> bytes:
    async with session.get(url, timeout=timeout) as response:
        response.raise_for_status()
        return await response.read()


async def fetch_envelope_price(
    url: str,
    session: aiohttp.ClientSession | None = None,
    timeout_seconds: float = 30.0,
) -> float:
    """GET *url* once and parse the price envelope from the response.

    Transport failures (``aiohttp.ClientError``, ``asyncio.TimeoutError``)
    propagate unchanged. When *session* is given it is used as-is and left
    open; otherwise a session is opened for this request only.
    """
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    logger.debug("GET %s", url)

    try:
        if session is not None:
            body = await _get_body(session, url, timeout)
        else:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            async with aiohttp.ClientSession(connector=connector) as own_session:
                body = await _get_body(own_session, url, timeout)
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.debug("Price request to %s failed: %s", url, e)
        raise

    return parse_price_envelope(body)
