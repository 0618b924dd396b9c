"""Command line entry point for the WalkupScan watcher."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import TYPE_CHECKING

import aiohttp
from loguru import logger

from .client import WalkupScanClient
from .config import WalkupScanConfig
from .const import DEBUG, ENV_NAME, ENV_PRINTER_IP
from .exceptions import WalkupScanError
from .orchestrator import WalkupScanOrchestrator
from .registry import DestinationRegistry

if TYPE_CHECKING:
    from .models.destination import WalkupScanDestination
    from .models.event import EventTable
    from .watcher import WatchSession

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def configure_logging(*, verbose: bool) -> None:
    """Send log output to stdout, at debug level when verbose."""
    logger.remove()
    logger.add(sys.stdout, colorize=DEBUG, level="DEBUG" if verbose else "INFO")


def print_destination_info(destination: WalkupScanDestination) -> None:
    """Print a destination in a copy-paste friendly format."""
    logger.info("=" * 60)
    logger.info(f"Name:          {destination.name}")
    logger.info(f"Hostname:      {destination.hostname or '-'}")
    logger.info(f"Link type:     {destination.link_type or '-'}")
    logger.info(f"Resource URI:  {destination.resource_uri}")
    logger.info("-" * 60)
    logger.info(json.dumps(destination.to_dict(), indent=2))
    logger.info("=" * 60)


def log_poll(session: WatchSession, table: EventTable) -> None:
    """Log the outcome of one event poll."""
    categories = ", ".join(event.category for event in table.events) or "none"
    logger.debug(f"Poll {session.polls} etag={session.etag} events: {categories}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="walkupscan",
        description="Register this host as a scan destination and wait for a scan.",
    )
    parser.add_argument(
        "--printer", help=f"printer host or URL (default: ${ENV_PRINTER_IP})"
    )
    parser.add_argument(
        "--name", help=f"destination name (default: ${ENV_NAME} or the hostname)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug output")

    subparsers = parser.add_subparsers(dest="command")
    watch = subparsers.add_parser("watch", help="wait for one scan (default)")
    watch.add_argument("--poll-timeout", type=int, help="seconds per long poll")
    watch.add_argument("--retry-delay", type=float, help="seconds between retries")
    watch.add_argument("--max-attempts", type=int, help="registration attempts")
    subparsers.add_parser("list", help="list registered destinations")
    subparsers.add_parser("remove", help="remove this host's destination")
    parser.set_defaults(command="watch")
    return parser


async def _watch(config: WalkupScanConfig, client: WalkupScanClient) -> int:
    orchestrator = WalkupScanOrchestrator(
        client,
        config.identity,
        logger=logger,
        retry_policy=config.retry_policy,
        poll_timeout=config.poll_timeout,
        on_destination=print_destination_info,
        on_poll=log_poll,
    )
    logger.info(f"Watching {config.base_url} for scans to {config.identity}")
    try:
        await orchestrator.run()
    except asyncio.CancelledError:
        orchestrator.cancel()
        raise
    return EXIT_OK


async def _list(client: WalkupScanClient) -> int:
    destinations = await client.list_destinations()
    if not destinations:
        logger.info("No destinations registered")
    for index, destination in enumerate(destinations, start=1):
        logger.info(f"  {index}. {destination.name} -> {destination.resource_uri}")
    return EXIT_OK


async def _remove(config: WalkupScanConfig, client: WalkupScanClient) -> int:
    registry = DestinationRegistry(client, logger=logger)
    removed = await registry.unregister_own_destination(config.identity)
    return EXIT_OK if removed else EXIT_ERROR


async def async_main(args: argparse.Namespace) -> int:
    """Run the selected command."""
    config = WalkupScanConfig.from_env(
        printer_address=args.printer,
        identity=args.name,
        poll_timeout=getattr(args, "poll_timeout", None),
        retry_delay=getattr(args, "retry_delay", None),
        max_attempts=getattr(args, "max_attempts", None),
    )
    async with aiohttp.ClientSession() as session:
        client = WalkupScanClient(config.base_url, session, logger=logger)
        if args.command == "list":
            return await _list(client)
        if args.command == "remove":
            return await _remove(config, client)
        return await _watch(config, client)


def main(argv: list[str] | None = None) -> int:
    """Parse arguments, run the command and return the exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    try:
        return asyncio.run(async_main(args))
    except WalkupScanError as e:
        logger.error(f"❌ {e}")
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("🛑 Cancelled by user")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
