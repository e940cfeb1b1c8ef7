"""Command-line interface for the Soroban RPC client."""
from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import asdict, is_dataclass

from .client import SorobanServer
from .config import load_config
from .logging_setup import configure_logging
from .models import RpcResponse


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="soroban-rpc",
        description="Query a Soroban RPC server",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: log_level from config, else INFO)",
    )

    sub = parser.add_subparsers(dest="command")

    sub.add_parser("health", help="Node health check")
    sub.add_parser("network", help="Network passphrase and protocol version")
    sub.add_parser("latest-ledger", help="Latest ledger known to the node")

    entry_parser = sub.add_parser("ledger-entry", help="Read a ledger entry")
    entry_parser.add_argument("key", help="Base64 XDR LedgerKey")

    tx_parser = sub.add_parser("transaction", help="Transaction status by hash")
    tx_parser.add_argument("hash", help="Hex transaction hash")

    return parser


def format_response(response: RpcResponse) -> str:
    """Render a response as ``key: value`` lines, skipping unset fields."""
    if response.error is not None:
        return f"error {response.error.code}: {response.error.message}"
    if not is_dataclass(response.result):
        return str(response.result)
    lines = [f"{k}: {v}" for k, v in asdict(response.result).items() if v is not None]
    return "\n".join(lines)


async def _run(args: argparse.Namespace) -> int:
    """Execute the selected command and return the exit code."""
    config = load_config(args.config)
    configure_logging(args.log_level or config.log_level)
    server = SorobanServer(config.server)

    if args.command == "health":
        response = await server.get_health()
    elif args.command == "network":
        response = await server.get_network()
    elif args.command == "latest-ledger":
        response = await server.get_latest_ledger()
    elif args.command == "ledger-entry":
        response = await server.get_ledger_entry(args.key)
    elif args.command == "transaction":
        response = await server.get_transaction(args.hash)
    else:
        build_parser().print_help()
        return 1

    print(format_response(response))
    return 1 if response.is_error else 0


def main() -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))
