import sys
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConsoleHandler(logging.StreamHandler):
    """Stderr handler installed once by ``setup_logging``."""

    def __init__(self):
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter(LOG_FORMAT))


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with a single stream handler.

    Calling it again only updates the level, so the CLI can apply a
    ``--log-level`` override after settings were loaded.
    """
    if level is None:
        from ..config import get_settings

        level = get_settings().LOG_LEVEL

    root = logging.getLogger()
    root.setLevel(level.upper())

    if any(isinstance(h, ConsoleHandler) for h in root.handlers):
        return

    root.addHandler(ConsoleHandler())

    # aiohttp is chatty at debug level
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
