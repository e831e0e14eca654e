"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenRef:
    """A token as seen by the source-selection policy."""

    contract_address: str
    chain_id: int


@dataclass(frozen=True)
class PriceResult:
    """Outcome of one fetch, delivered to completion callbacks.

    Exactly one of ``price`` and ``error`` is set.
    """

    price: float | None = None
    error: BaseException | None = None

    def __post_init__(self) -> None:
        if (self.price is None) == (self.error is None):
            raise ValueError("PriceResult needs exactly one of price or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> float:
        """Return the price, or re-raise the failure."""
        if self.error is not None:
            raise self.error
        return self.price  # type: ignore[return-value]
