"""Command-line interface for the token price fetcher."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys

import aiohttp
import yaml

from .config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from .errors import PriceSourceError
from .fetcher import PriceFetcher
from .logging_setup import configure_logging
from .models import TokenRef
from .selection import InMemoryCustomURLStore, select_price_source

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="token-price",
        description="Fetch the current USD price of a token",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: ./config.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    fetch_parser = sub.add_parser("fetch", help="Fetch the USD price of a token")
    fetch_parser.add_argument("address", help="Token contract address")
    fetch_parser.add_argument(
        "--chain-id",
        type=int,
        default=None,
        help="Chain the token lives on (default: the supported chain)",
    )
    fetch_parser.add_argument(
        "--custom-url",
        default=None,
        help="Price URL to use instead of DexScreener (overrides config)",
    )

    return parser


def _load_app_config(path: str | None) -> AppConfig:
    if path is None and not DEFAULT_CONFIG_PATH.exists():
        logger.debug("No %s found, using defaults", DEFAULT_CONFIG_PATH)
        return AppConfig()
    return load_config(path)


async def _fetch(args: argparse.Namespace, config: AppConfig) -> int:
    store = InMemoryCustomURLStore(config.custom_price_urls)
    if args.custom_url:
        store.set(args.address, args.custom_url)

    chain_id = (
        args.chain_id if args.chain_id is not None else config.selection.supported_chain_id
    )
    token = TokenRef(contract_address=args.address, chain_id=chain_id)

    source = select_price_source(token, store, config)
    if source is None:
        logger.error("No price source available for chain %s", chain_id)
        return 1

    try:
        price = await PriceFetcher(source).fetch_price_usd(args.address)
    except (PriceSourceError, aiohttp.ClientError, asyncio.TimeoutError) as e:
        logger.error("Price fetch failed for %s: %s", args.address, e)
        return 1

    print(f"{price}")
    return 0


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command."""
    configure_logging(args.log_level)
    try:
        config = _load_app_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error("Invalid configuration: %s", e)
        return 1

    if args.command == "fetch":
        try:
            return await _fetch(args, config)
        except PriceSourceError as e:
            logger.error("Invalid custom URL: %s", e)
            return 1

    build_parser().print_help()
    return 1


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
