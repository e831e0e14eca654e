"""DexScreener price source — the default public aggregator."""
from __future__ import annotations

import logging

import aiohttp

from ..config import DexScreenerConfig
from ..urls import check_http_url
from .envelope import fetch_envelope_price

logger = logging.getLogger(__name__)


class DexScreenerPriceSource:
    """Fetch token prices from the DexScreener tokens endpoint for one chain."""

    def __init__(
        self,
        config: DexScreenerConfig | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        config = config or DexScreenerConfig()
        self.base_url = config.base_url.rstrip("/")
        self.chain_id = config.chain_id
        self.timeout_seconds = config.timeout_seconds
        self._session = session

    def build_url(self, token_address: str) -> str:
        return f"{self.base_url}/{self.chain_id}/{token_address}"

    async def fetch_price_usd(self, token_address: str) -> float:
        """Fetch the USD price of *token_address* on the configured chain."""
        url = self.build_url(token_address)
        check_http_url(url)

        price = await fetch_envelope_price(
            url, session=self._session, timeout_seconds=self.timeout_seconds
        )
        logger.debug("DexScreener price for %s: $%s", token_address, price)
        return price
