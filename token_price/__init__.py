"""USD price lookup for on-chain tokens with pluggable price sources."""
from .errors import PriceErrorKind, PriceSourceError
from .fetcher import PriceFetcher
from .models import PriceResult, TokenRef
from .selection import InMemoryCustomURLStore, select_price_source
from .urls import validate_custom_url
from .sources import CustomURLPriceSource, DexScreenerPriceSource

__all__ = [
    "CustomURLPriceSource",
    "DexScreenerPriceSource",
    "InMemoryCustomURLStore",
    "PriceErrorKind",
    "PriceFetcher",
    "PriceResult",
    "PriceSourceError",
    "TokenRef",
    "select_price_source",
    "validate_custom_url",
]
