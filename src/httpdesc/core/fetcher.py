"""HTTP fetcher that describes responses, using httpx."""

import asyncio
import logging

import httpx

from .factory import from_httpx
from .protocols import HTTPResponseDescriptor

DEFAULT_USER_AGENT = "httpdesc/0.1"

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Async HTTP fetcher using httpx with connection reuse."""

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
        max_connections: int = 100,
        max_keepalive_connections: int = 20,
    ):
        self.timeout = httpx.Timeout(timeout)
        self.user_agent = user_agent
        self.limits = httpx.Limits(
            max_connections=max_connections,
            max_keepalive_connections=max_keepalive_connections,
        )
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client with double-checked locking."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=self.timeout,
                        limits=self.limits,
                        headers={"User-Agent": self.user_agent},
                        follow_redirects=True,
                    )
        return self._client

    async def fetch(self, url: str, method: str = "GET") -> HTTPResponseDescriptor:
        """Fetch a URL and describe the final response."""
        client = await self._get_client()
        resp = await client.request(method, url)
        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return from_httpx(resp)

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
