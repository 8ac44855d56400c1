"""Client for the feature flag endpoints."""
import logging

from .transport import HTTPTransport
from ..schemas import DEFAULT_FLAG_KEY, FlagUpdate, HealthStatus, FlagsResponse, FlagUpdateResponse
from .resource_client import ResourceClient

logger = logging.getLogger(__name__)


class FlagClient(ResourceClient):
    """Client for flag read/write operations"""

    def __init__(self, http: HTTPTransport):
        super().__init__(http)

    async def get_flags(self) -> FlagsResponse:
        response = await self._http.request("GET", "/api/flags")
        if response is None:
            raise ValueError("Empty response from /api/flags")
        return FlagsResponse.model_validate(response)

    async def get_flag(self, key: str = DEFAULT_FLAG_KEY) -> bool:
        flags = await self.get_flags()
        return flags.get(key)

    async def set_flag(self, state: bool) -> FlagUpdateResponse:
        """Write a new flag state.

        Raises whatever the transport raises on a non-ok status. Any ok status
        is an acknowledgment; the body is only read when it is a JSON object.
        """
        update = FlagUpdate(state=state)
        response = await self._http.request("POST", "/api/flags", data=update.model_dump())
        if not isinstance(response, dict):
            return FlagUpdateResponse()
        return FlagUpdateResponse(**response)

    async def health(self) -> HealthStatus:
        try:
            response = await self._http.request("GET", "/api/health")
        except Exception as e:
            logger.warning(f"Health check failed: {e}")
            return HealthStatus(status="unavailable", detail=str(e))
        if not isinstance(response, dict):
            return HealthStatus()
        return HealthStatus(**response)
