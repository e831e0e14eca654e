"""Choosing a price source for a token, and the custom URL settings it reads."""
from __future__ import annotations

import logging
from typing import Mapping

import aiohttp

from .config import AppConfig
from .interfaces.custom_url_store import CustomURLStore
from .interfaces.price_source import PriceSource
from .models import TokenRef
from .sources import CustomURLPriceSource, DexScreenerPriceSource
from .urls import validate_custom_url

logger = logging.getLogger(__name__)


class InMemoryCustomURLStore:
    """Custom price URLs keyed by contract address.

    Addresses are matched case-insensitively, so checksummed and lower-case
    forms of the same address share one entry. URLs are validated on write.
    """

    def __init__(self, urls: Mapping[str, str] | None = None) -> None:
        self._urls: dict[str, str] = {}
        for address, url in (urls or {}).items():
            self.set(address, url)

    def get(self, contract_address: str) -> str | None:
        return self._urls.get(contract_address.lower())

    def set(self, contract_address: str, url: str) -> None:
        self._urls[contract_address.lower()] = validate_custom_url(url)


def select_price_source(
    token: TokenRef,
    custom_urls: CustomURLStore,
    config: AppConfig | None = None,
    session: aiohttp.ClientSession | None = None,
) -> PriceSource | None:
    """Pick the price source for *token*.

    A stored custom URL wins; otherwise tokens on the supported chain use
    DexScreener. Returns None when neither applies, in which case no price
    should be fetched.
    """
    config = config or AppConfig()

    custom_url = custom_urls.get(token.contract_address)
    if custom_url:
        logger.debug("Using custom price URL for %s", token.contract_address)
        return CustomURLPriceSource(custom_url, config.custom_source, session=session)

    if token.chain_id == config.selection.supported_chain_id:
        return DexScreenerPriceSource(config.dexscreener, session=session)

    logger.debug(
        "No price source for %s on chain %s", token.contract_address, token.chain_id
    )
    return None
