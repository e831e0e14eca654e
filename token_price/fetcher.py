"""Price fetcher — forwards requests to a single price source."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable

from .interfaces.price_source import PriceSource
from .models import PriceResult
from .sources import DexScreenerPriceSource

logger = logging.getLogger(__name__)


class PriceFetcher:
    """Fetch USD prices through the source chosen at construction.

    The source cannot be replaced afterwards; build a new fetcher to switch.
    """

    def __init__(self, source: PriceSource | None = None) -> None:
        self._source: PriceSource = (
            source if source is not None else DexScreenerPriceSource()
        )

    @property
    def source(self) -> PriceSource:
        return self._source

    async def fetch_price_usd(self, token_address: str) -> float:
        """Return the source's price, or raise the source's error unchanged."""
        return await self._source.fetch_price_usd(token_address)

    def fetch_price_usd_with_completion(
        self,
        token_address: str,
        completion: Callable[[PriceResult], None],
    ) -> asyncio.Task[None]:
        """Schedule a fetch and hand its outcome to *completion* exactly once.

        Must be called from a running event loop. The returned task completes
        after *completion* has run.
        """

        async def _run() -> None:
            try:
                price = await self.fetch_price_usd(token_address)
            except Exception as e:
                logger.debug("Price fetch for %s failed: %s", token_address, e)
                completion(PriceResult(error=e))
                return
            completion(PriceResult(price=price))

        return asyncio.get_running_loop().create_task(_run())
