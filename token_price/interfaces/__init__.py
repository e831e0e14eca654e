"""Protocol interfaces for the token price fetcher."""
from .custom_url_store import CustomURLStore
from .price_source import PriceSource

__all__ = ["CustomURLStore", "PriceSource"]
