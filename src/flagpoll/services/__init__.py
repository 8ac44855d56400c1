from .poller import FlagPoller
from .flag_client import FlagClient
from .resource_client import ResourceClient

__all__ = [
    "FlagClient",
    "FlagPoller",
    "ResourceClient",
]
