"""Shared test fixtures, stub transport and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any

import pytest

from token_price.config import (
    AppConfig,
    CustomSourceConfig,
    DexScreenerConfig,
    SelectionConfig,
)

BSC_TOKEN = "0x55d398326f99059fF775485246999027B3197955"
CUSTOM_URL = "https://custom.example/price.json"


# ---------------------------------------------------------------------------
# Stub transport
# ---------------------------------------------------------------------------


class FakeResponse:
    """Minimal stand-in for ``aiohttp.ClientResponse``."""

    def __init__(self, body: bytes, status_error: BaseException | None = None) -> None:
        self._body = body
        self._status_error = status_error

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    def raise_for_status(self) -> None:
        if self._status_error is not None:
            raise self._status_error

    async def read(self) -> bytes:
        return self._body


class FakeSession:
    """Records every GET and answers with a canned body or error."""

    def __init__(
        self,
        body: bytes = b"",
        error: BaseException | None = None,
        status_error: BaseException | None = None,
    ) -> None:
        self.body = body
        self.error = error
        self.status_error = status_error
        self.requests: list[str] = []
        self.request_kwargs: list[dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        self.requests.append(str(url))
        self.request_kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        return FakeResponse(self.body, self.status_error)


@pytest.fixture()
def price_body() -> bytes:
    return b'{"pairs":[{"priceUsd":"1.23"}]}'


@pytest.fixture()
def fake_session(price_body: bytes) -> FakeSession:
    return FakeSession(body=price_body)


@pytest.fixture()
def make_session() -> type[FakeSession]:
    return FakeSession


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_dexscreener_config() -> DexScreenerConfig:
    return DexScreenerConfig(
        base_url="https://api.dexscreener.example/latest/tokens/v1",
        chain_id=56,
        timeout_seconds=5.0,
    )


@pytest.fixture()
def sample_app_config(sample_dexscreener_config: DexScreenerConfig) -> AppConfig:
    return AppConfig(
        dexscreener=sample_dexscreener_config,
        custom_source=CustomSourceConfig(timeout_seconds=7.0),
        selection=SelectionConfig(supported_chain_id=56),
        custom_price_urls={BSC_TOKEN: CUSTOM_URL},
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    dexscreener:
      base_url: "https://api.dexscreener.example/latest/tokens/v1"
      chain_id: 56
      timeout_seconds: 5
    custom_source:
      timeout_seconds: 7
    selection:
      supported_chain_id: 56
    custom_price_urls:
      "0xAbC0000000000000000000000000000000000001": "https://custom.example/price.json"
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
