import logging

from .base import FlagView

logger = logging.getLogger(__name__)

FLAG_LABEL = "Test Feature Number Uno"


class AdminClient(FlagView):
    """Client for flag setters: shows the flag as a toggle and writes changes back."""

    def render(self) -> str:
        mark = "x" if self.flag else " "
        return f"{FLAG_LABEL} [{mark}] {'ON' if self.flag else 'OFF'}"

    async def toggle(self) -> bool:
        """Send the negation of the current value.

        The new value is adopted locally only after the service acknowledges
        the write. Returns True when the write was committed.
        """
        new_value = not self.flag
        try:
            ack = await self.client.set_flag(new_value)
        except Exception as e:
            logger.error(f"Error updating flag to {new_value}: {e}")
            return False

        if not ack.success:
            logger.error(f"Flag service rejected update to {new_value}")
            return False

        logger.info(f"Flag updated to {new_value}")
        await self.poller.set_state(new_value)
        return True
