"""Command line entry point: ``flagpoll viewer`` and ``flagpoll admin``."""
import sys
import asyncio
import logging
import argparse
import threading
from typing import Optional

from .config import get_settings
from .utils import setup_logging
from .clients import AdminClient, ViewerClient
from .services import FlagClient
from .clients.base import FlagView
from .services.transport import AioHTTPTransport

logger = logging.getLogger(__name__)

ADMIN_HELP = "Commands: t = toggle, q = quit"


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="flagpoll", description="Poll and toggle a remote feature flag.")
    parser.add_argument("--api-url", default=settings.get_base_url(), help="Flag service base URL")
    parser.add_argument(
        "--interval", type=positive_float, default=str(settings.POLL_INTERVAL), help="Seconds between polls"
    )
    parser.add_argument("--key", default=settings.FLAG_KEY, help="Flag name to read")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("viewer", help="Show which branch the flag selects")
    sub.add_parser("admin", help="Show the flag and toggle it from stdin")
    return parser


async def _check_health(client: FlagClient) -> None:
    health = await client.health()
    if not health.is_ok:
        logger.warning(f"Flag service not healthy ({health.status}); polling anyway")


def _read_stdin(loop: asyncio.AbstractEventLoop, queue: asyncio.Queue) -> None:
    """Feed stdin lines into ``queue``; ``None`` marks end of input."""
    stream = sys.stdin
    try:
        for line in iter(stream.readline, ""):
            loop.call_soon_threadsafe(queue.put_nowait, line)
        loop.call_soon_threadsafe(queue.put_nowait, None)
    except RuntimeError:
        # loop closed while we were blocked in readline
        return


def stdin_lines() -> asyncio.Queue:
    """Start a daemon reader thread so shutdown never waits on a blocked readline."""
    queue: asyncio.Queue = asyncio.Queue()
    thread = threading.Thread(
        target=_read_stdin, args=(asyncio.get_running_loop(), queue), name="flagpoll-stdin", daemon=True
    )
    thread.start()
    return queue


async def _run_viewer(view: FlagView) -> None:
    await view.start()
    await asyncio.Event().wait()


async def _run_admin(view: AdminClient) -> None:
    await view.start()
    print(ADMIN_HELP)
    lines = stdin_lines()
    while True:
        line = await lines.get()
        if line is None:
            break
        command = line.strip().lower()
        if command == "q":
            break
        if command == "t":
            await view.toggle()
        elif command:
            print(ADMIN_HELP)


async def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    transport = AioHTTPTransport(base_url=args.api_url, timeout=settings.REQUEST_TIMEOUT)
    client = FlagClient(transport)
    view: Optional[FlagView] = None
    health = asyncio.create_task(_check_health(client))
    try:
        if args.command == "admin":
            view = AdminClient(client, interval=args.interval, key=args.key)
            await _run_admin(view)
        else:
            view = ViewerClient(client, interval=args.interval, key=args.key)
            await _run_viewer(view)
    finally:
        if not health.done():
            health.cancel()
        await asyncio.gather(health, return_exceptions=True)
        if view is not None:
            await view.stop()
            await view.poller.wait_inflight()
        await transport.close()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    try:
        asyncio.run(run(args))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
