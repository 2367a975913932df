"""
Command line interface for BlockNet.

    blocknet watch                 live dashboard, polls the node
    blocknet send Alan Bob 5       submit a transaction
    blocknet chain [--json]        print the chain once
    blocknet plot [-o DIR]         render activity charts
"""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional

from .client import BlockNetClient
from .config import LOG_FORMAT, LOG_LEVELS, ClientConfig
from .endpoint import StaticContext
from .exceptions import BlockNetError
from .models import Chain
from .sync import SyncLoop, SyncState
from .utils import Utils
from .view import TransactionView


RULE = "=" * 60


def render(state: SyncState, now: Optional[float] = None) -> str:
    """Text rendering of the dashboard for one state"""
    view = TransactionView.from_chain(state.chain, now)
    lines = [RULE, "Blockchain Network", RULE]
    if state.last_error:
        lines.append(f"! {state.last_error}")
    lines.append(f"Transactions ({view.transaction_count})")
    if view.is_empty:
        lines.append("  No transactions yet. Create one to get started!")
    for tx in view.transactions:
        lines.append(
            f"  {Utils.format_name(tx.sender):<20} -> "
            f"{Utils.format_name(tx.recipient):<20} {Utils.format_amount(tx.amount):>12}"
        )
    lines.append("-" * 60)
    lines.append(f"Total Blocks: {view.block_count}")
    lines.append(f"Last Update: {Utils.format_time(view.last_updated)}")
    if state.last_synced is not None:
        age = Utils.seconds_to_readable(view.last_updated - state.last_synced)
        lines.append(f"Last Sync: {age} ago")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    config = ClientConfig.from_env()
    parser = argparse.ArgumentParser(prog="blocknet", description="BlockNet ledger client")
    parser.add_argument("--port", default=config.api_port,
                        help="node port, 5000-5002 select node-1..node-3 (default: %(default)s)")
    parser.add_argument("--base-url", default=config.base_url,
                        help="fixed node URL, skips endpoint resolution")
    parser.add_argument("--context", choices=("auto", "loopback", "network"), default="auto",
                        help="reach the node via localhost or via its service name")
    parser.add_argument("--timeout", type=float, default=config.timeout,
                        help="request timeout in seconds (default: %(default)s)")
    parser.add_argument("--log-level", default=config.log_level,
                        choices=LOG_LEVELS)

    sub = parser.add_subparsers(dest="command", required=True)

    watch = sub.add_parser("watch", help="poll the node and show transactions")
    watch.add_argument("--interval", type=float, default=config.poll_interval,
                       help="seconds between refreshes (default: %(default)s)")
    watch.add_argument("--duration", type=float, default=None,
                       help="stop after this many seconds")

    send = sub.add_parser("send", help="submit a transaction")
    send.add_argument("sender")
    send.add_argument("recipient")
    send.add_argument("amount")

    chain = sub.add_parser("chain", help="print the current chain")
    chain.add_argument("--json", action="store_true", help="dump the raw snapshot")

    plot = sub.add_parser("plot", help="render activity charts")
    plot.add_argument("-o", "--output", default="datagraphics", help="output directory")
    plot.add_argument("-i", "--input", default=None, help="read the chain from a JSON file")

    return parser


def make_client(args: argparse.Namespace) -> BlockNetClient:
    context = None
    if args.context != "auto":
        context = StaticContext(args.context == "loopback")
    return BlockNetClient(port=args.port, context=context, base_url=args.base_url,
                          timeout=args.timeout)


def cmd_watch(client: BlockNetClient, args: argparse.Namespace) -> int:
    def show(state: SyncState):
        print(render(state), flush=True)

    loop = SyncLoop(client, interval=args.interval, on_update=show)
    try:
        asyncio.run(loop.run(args.duration))
    except KeyboardInterrupt:
        pass
    return 0


def cmd_send(client: BlockNetClient, args: argparse.Namespace) -> int:
    loop = SyncLoop(client)
    loop.form.update(sender=args.sender, recipient=args.recipient, amount=args.amount)
    result = asyncio.run(loop.submit())
    if result is None:
        print(f"✗ {loop.state.last_error}", file=sys.stderr)
        return 1
    print(f"✓ {result.message}")
    print(render(loop.state))
    return 0


def cmd_chain(client: BlockNetClient, args: argparse.Namespace) -> int:
    try:
        chain = client.fetch_chain()
    except BlockNetError:
        print("✗ Failed to fetch blockchain data", file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps({'chain': [asdict(b) for b in chain.blocks], 'length': chain.length}, indent=2))
    else:
        print(render(SyncState(chain=chain)))
    return 0


def cmd_plot(client: BlockNetClient, args: argparse.Namespace) -> int:
    from .visualize import render_all

    if args.input:
        with open(args.input, 'r') as f:
            chain = Chain.from_dict(json.load(f))
    else:
        try:
            chain = client.fetch_chain()
        except BlockNetError:
            print("✗ Failed to fetch blockchain data", file=sys.stderr)
            return 1
    for path in render_all(chain, args.output):
        print(f"✓ {path}")
    return 0


COMMANDS = {
    "watch": cmd_watch,
    "send": cmd_send,
    "chain": cmd_chain,
    "plot": cmd_plot,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=LOG_FORMAT)
    with make_client(args) as client:
        return COMMANDS[args.command](client, args)


if __name__ == "__main__":
    sys.exit(main())
