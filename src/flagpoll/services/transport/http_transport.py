import json
import logging
from typing import Any, Optional, Protocol
from typing_extensions import runtime_checkable

import aiohttp
from httpx import HTTPError

logger = logging.getLogger(__name__)


@runtime_checkable
class HTTPTransport(Protocol):
    """Protocol for HTTP transport operations"""

    async def request(
        self, method: str, endpoint: str, data: Optional[dict[str, Any]] = None, params: Optional[dict[str, Any]] = None
    ) -> Any: ...


class AioHTTPTransport(HTTPTransport):
    """AIOHTTP implementation of HTTP transport"""

    def __init__(self, base_url: str, session: Optional[aiohttp.ClientSession] = None, timeout: float = 30):
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "accept": "application/json",
            "Content-Type": "application/json",
        }
        self._owns_session = session is None
        self.session = session or aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=timeout),
        )

    async def request(
        self, method: str, endpoint: str, data: Optional[dict[str, Any]] = None, params: Optional[dict[str, Any]] = None
    ) -> Any:
        url = f"{self.base_url}{endpoint}"
        try:
            async with self.session.request(
                method.upper(), url, json=data, params=params, headers=self.headers
            ) as response:
                if response.status >= 400:
                    detail = (await response.text()).strip()
                    logger.error(f"HTTP {response.status}: {detail}, url: {url}")
                    raise HTTPError(f"HTTP {response.status}: {detail or 'Unknown error'}")
                text = (await response.text()).strip()
                if not text:
                    return None
                try:
                    return json.loads(text)
                except ValueError:
                    logger.debug(f"Non-JSON body from {url}: {text[:100]}")
                    return text
        except aiohttp.ClientError as e:
            logger.error(f"Request failed: {str(e)}, url: {url}")
            raise ConnectionError(f"Request failed: {str(e)}")

    async def close(self) -> None:
        if self._owns_session and not self.session.closed:
            await self.session.close()
