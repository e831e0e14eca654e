"""Price source backed by a user-supplied URL."""
from __future__ import annotations

import logging

import aiohttp

from ..config import CustomSourceConfig
from ..urls import check_http_url
from .envelope import fetch_envelope_price

logger = logging.getLogger(__name__)


class CustomURLPriceSource:
    """Fetch a price from a fixed URL that already resolves to the wanted pair.

    The token address passed to :meth:`fetch_price_usd` is not part of the
    request.
    """

    def __init__(
        self,
        url: str,
        config: CustomSourceConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        config = config or CustomSourceConfig()
        self.url = url
        self.timeout_seconds = config.timeout_seconds
        self._session = session

    async def fetch_price_usd(self, token_address: str) -> float:
        check_http_url(self.url)

        price = await fetch_envelope_price(
            self.url, session=self._session, timeout_seconds=self.timeout_seconds
        )
        logger.debug("Custom URL price for %s: $%s", token_address, price)
        return price
