"""Periodic reader for a single feature flag."""
import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

from ..schemas import DEFAULT_FLAG_KEY
from .flag_client import FlagClient

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 5.0


async def _notify(callback: Optional[Callable[..., Any]], *args) -> None:
    if callback is None:
        return
    result = callback(*args)
    if inspect.isawaitable(result):
        await result


class FlagPoller:
    """Reads a flag on start and then every ``interval`` seconds until stopped.

    Each tick fires its read without waiting for the previous one, so a slow
    read can overlap the next tick. Reads that finish after ``stop()`` are
    discarded. A failed read is logged and leaves ``state`` untouched.

    Args:
        client: Flag client used for reads
        interval: Seconds between reads
        key: Flag name to read
        on_change: Called with the new value whenever ``state`` changes
        on_settled: Called after every read that was not discarded, success or failure
    """

    def __init__(
        self,
        client: FlagClient,
        interval: float = DEFAULT_POLL_INTERVAL,
        key: str = DEFAULT_FLAG_KEY,
        on_change: Optional[Callable[[bool], Any]] = None,
        on_settled: Optional[Callable[[], Any]] = None,
        initial: bool = False,
    ):
        if interval <= 0:
            raise ValueError("Poll interval must be positive")
        self.client = client
        self.interval = interval
        self.key = key
        self.on_change = on_change
        self.on_settled = on_settled
        self.state = initial
        self.settled = False
        self.running = False
        self._task: Optional[asyncio.Task] = None
        self._inflight: set[asyncio.Task] = set()
        self._generation = 0

    async def start(self) -> None:
        """Start polling. The first read is issued immediately."""
        if not self.running:
            self.running = True
            self._generation += 1
            self._task = asyncio.create_task(self._run())
            logger.info(f"Polling '{self.key}' every {self.interval}s")

    async def stop(self) -> None:
        """Cancel the poll timer. In-flight reads are left to finish."""
        if self.running:
            self.running = False
            self._generation += 1
            if self._task:
                self._task.cancel()
                try:
                    await self._task
                except asyncio.CancelledError:
                    pass
            self._task = None
            logger.info(f"Stopped polling '{self.key}'")

    async def wait_inflight(self) -> None:
        """Wait for reads that are still outstanding."""
        if self._inflight:
            await asyncio.gather(*self._inflight, return_exceptions=True)

    async def set_state(self, value: bool) -> None:
        """Adopt a value obtained outside of polling, e.g. after a committed write."""
        await self._apply(value)

    async def poll_once(self) -> Optional[bool]:
        """Read the flag once; returns the value read, or None on failure."""
        return await self._poll(self._generation)

    async def _run(self) -> None:
        while self.running:
            task = asyncio.create_task(self._poll(self._generation))
            self._inflight.add(task)
            task.add_done_callback(self._inflight.discard)
            await asyncio.sleep(self.interval)

    def _is_stale(self, generation: int) -> bool:
        return generation != self._generation

    async def _poll(self, generation: int) -> Optional[bool]:
        try:
            value = await self.client.get_flag(self.key)
        except Exception as e:
            if self._is_stale(generation):
                logger.debug(f"Discarding failed read after stop: {e}")
                return None
            logger.error(f"Error getting flag '{self.key}': {e}")
            self.settled = True
            await _notify(self.on_settled)
            return None

        if self._is_stale(generation):
            logger.debug(f"Discarding read after stop: {self.key}={value}")
            return None

        logger.debug(f"Flag '{self.key}' is {value}")
        self.settled = True
        await self._apply(value)
        await _notify(self.on_settled)
        return value

    async def _apply(self, value: bool) -> None:
        if value == self.state:
            return
        self.state = value
        logger.info(f"Flag '{self.key}' changed to {value}")
        await _notify(self.on_change, value)
