"""Shared plumbing for the terminal flag clients."""
import logging
from typing import Callable, Optional

from ..schemas import DEFAULT_FLAG_KEY
from ..services import FlagClient, FlagPoller
from ..services.poller import DEFAULT_POLL_INTERVAL

logger = logging.getLogger(__name__)


class FlagView:
    """Owns a poller and redraws through ``output`` whenever the rendering changes."""

    def __init__(
        self,
        client: FlagClient,
        interval: float = DEFAULT_POLL_INTERVAL,
        key: str = DEFAULT_FLAG_KEY,
        output: Optional[Callable[[str], None]] = None,
    ):
        self.client = client
        self.output = output or print
        self.poller = FlagPoller(
            client,
            interval=interval,
            key=key,
            on_change=self._on_change,
            on_settled=self._on_settled,
        )
        self._last_drawn: Optional[str] = None

    @property
    def flag(self) -> bool:
        return self.poller.state

    def render(self) -> str:
        raise NotImplementedError

    def draw(self) -> None:
        text = self.render()
        if text == self._last_drawn:
            return
        self._last_drawn = text
        self.output(text)

    async def start(self) -> None:
        self.draw()
        await self.poller.start()

    async def stop(self) -> None:
        await self.poller.stop()

    async def _on_change(self, value: bool) -> None:
        self.draw()

    async def _on_settled(self) -> None:
        self.draw()
