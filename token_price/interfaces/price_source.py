"""Price source protocol — USD quote for a single token."""
from typing import Protocol


class PriceSource(Protocol):
    """Abstract interface for fetching a token's USD price."""

    async def fetch_price_usd(self, token_address: str) -> float: ...
