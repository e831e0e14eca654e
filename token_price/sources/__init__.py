"""Price source implementations."""
from .custom_url import CustomURLPriceSource
from .dexscreener import DexScreenerPriceSource

__all__ = ["CustomURLPriceSource", "DexScreenerPriceSource"]
