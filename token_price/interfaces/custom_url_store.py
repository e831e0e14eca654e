"""Custom URL store protocol — per-token price URL overrides."""
from typing import Protocol


class CustomURLStore(Protocol):
    """Abstract interface for the externally owned custom price URL settings."""

    def get(self, contract_address: str) -> str | None: ...

    def set(self, contract_address: str, url: str) -> None: ...
