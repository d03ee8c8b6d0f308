"""Command-line entry point.

Usage:
    pocketmon --node <your_node_id> --key <your_api_key>
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys

import httpx

from pocketmon.collectors import HostCollector, NodeCollector
from pocketmon.config import Settings, settings
from pocketmon.engine import Reporter, SamplingLoop, SnapshotAssembler, Ticker

logger = logging.getLogger(__name__)


def build_loop(client: httpx.AsyncClient, node_id: str, api_key: str, cfg: Settings) -> SamplingLoop:
    """Wire collectors, assembler, reporter and ticker around one shared client."""
    assembler = SnapshotAssembler(
        HostCollector(),
        NodeCollector(
            client,
            node_api_url=cfg.node_api_url,
            rpc_url=cfg.rpc_url,
            chain=cfg.chain,
        ),
    )
    reporter = Reporter(client, endpoint=cfg.collector_endpoint)
    return SamplingLoop(assembler, reporter, node_id, api_key, Ticker(cfg.sample_interval))


async def run(node_id: str, api_key: str, cfg: Settings, stop_event: asyncio.Event | None = None) -> None:
    """Run the sampling loop until SIGINT/SIGTERM (or *stop_event*) arrives."""
    stop_event = stop_event or asyncio.Event()
    loop = asyncio.get_running_loop()
    installed: list[signal.Signals] = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
            installed.append(sig)
        except (NotImplementedError, RuntimeError):
            # Windows event loops; KeyboardInterrupt ends the wait instead.
            pass

    async with httpx.AsyncClient(timeout=cfg.request_timeout) as client:
        sampling_loop = build_loop(client, node_id, api_key, cfg)
        await sampling_loop.start()
        try:
            await stop_event.wait()
        finally:
            await sampling_loop.stop()
            for sig in installed:
                loop.remove_signal_handler(sig)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pocketmon",
        description="Pocketmon monitors your pocket nodes and notifies you when there is an issue",
    )
    parser.add_argument("-n", "--node", required=True, help="Node ID (required) (Get from lunar.dev)")
    parser.add_argument("-k", "--key", required=True, help="API Key (required) (Get from lunar.dev)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    print(f"Started monitoring node: {args.node}\nYou can view health status at {settings.dashboard_url}")

    try:
        asyncio.run(run(args.node, args.key, settings))
    except KeyboardInterrupt:
        pass
    logger.info("%s shut down", settings.app_name)


if __name__ == "__main__":
    main(sys.argv[1:])
