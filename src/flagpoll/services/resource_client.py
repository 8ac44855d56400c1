"""Base client for resource operations."""
from .transport import HTTPTransport


class ResourceClient:
    """Base client for resource operations."""

    def __init__(self, http: HTTPTransport):
        """Initialize resource client."""
        self._http = http
