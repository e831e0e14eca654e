"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import PriceSourceError
from .urls import validate_custom_url

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")

# BNB Smart Chain
BSC_CHAIN_ID = 56

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DexScreenerConfig:
    base_url: str = "https://api.dexscreener.com/latest/tokens/v1"
    chain_id: int = BSC_CHAIN_ID
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class CustomSourceConfig:
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class SelectionConfig:
    supported_chain_id: int = BSC_CHAIN_ID


@dataclass(frozen=True)
class AppConfig:
    dexscreener: DexScreenerConfig = field(default_factory=DexScreenerConfig)
    custom_source: CustomSourceConfig = field(default_factory=CustomSourceConfig)
    selection: SelectionConfig = field(default_factory=SelectionConfig)
    custom_price_urls: dict[str, str] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_dexscreener(raw: dict[str, Any]) -> DexScreenerConfig:
    return DexScreenerConfig(
        base_url=raw.get("base_url", DexScreenerConfig.base_url),
        chain_id=int(raw.get("chain_id", BSC_CHAIN_ID)),
        timeout_seconds=float(raw.get("timeout_seconds", 30.0)),
    )


def _build_custom_source(raw: dict[str, Any]) -> CustomSourceConfig:
    return CustomSourceConfig(
        timeout_seconds=float(raw.get("timeout_seconds", 30.0)),
    )


def _build_selection(raw: dict[str, Any]) -> SelectionConfig:
    return SelectionConfig(
        supported_chain_id=int(raw.get("supported_chain_id", BSC_CHAIN_ID)),
    )


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the mapping under *name*, or {} when the key is absent or empty."""
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return value


def _build_custom_price_urls(raw: dict[str, Any]) -> dict[str, str]:
    urls: dict[str, str] = {}
    for address, url in raw.items():
        # YAML reads an unquoted 0x... key as a hex integer
        if not isinstance(address, str):
            raise ValueError(
                f"Custom price URL key {address!r} is not a string; "
                "quote contract addresses in config.yaml"
            )
        # Empty values (e.g. an unset ${VAR}) mean "no override"
        if url:
            urls[address] = str(url)
    return urls


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            current working directory.
    """
    load_dotenv()

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping")

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        dexscreener=_build_dexscreener(_section(raw, "dexscreener")),
        custom_source=_build_custom_source(_section(raw, "custom_source")),
        selection=_build_selection(_section(raw, "selection")),
        custom_price_urls=_build_custom_price_urls(_section(raw, "custom_price_urls")),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if cfg.dexscreener.chain_id <= 0:
        raise ValueError(f"Invalid DexScreener chain id: {cfg.dexscreener.chain_id}")
    if cfg.selection.supported_chain_id <= 0:
        raise ValueError(
            f"Invalid supported chain id: {cfg.selection.supported_chain_id}"
        )
    if cfg.dexscreener.timeout_seconds <= 0:
        raise ValueError("DexScreener timeout_seconds must be positive")
    if cfg.custom_source.timeout_seconds <= 0:
        raise ValueError("Custom source timeout_seconds must be positive")

    for address, url in cfg.custom_price_urls.items():
        try:
            validate_custom_url(url)
        except PriceSourceError as e:
            raise ValueError(
                f"Custom price URL for '{address}' is not a valid http(s) URL: {url}"
            ) from e
