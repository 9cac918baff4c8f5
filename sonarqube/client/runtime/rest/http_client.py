"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from ...core.constants import DEFAULT_TIMEOUT
from ...core.exceptions import TransportError
from .request import PreparedRequest

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper.

    The session is created lazily on first use and recreated if it was closed.
    A session passed in by the caller is used as-is and never closed here.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        *,
        auto_decompress: bool = True,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.auto_decompress = auto_decompress
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self.timeout,
                auto_decompress=self.auto_decompress,
            )
            self._owns_session = True
        return self._session

    async def send(self, request: PreparedRequest) -> aiohttp.ClientResponse:
        """Send a prepared request and return the unread response.

        The caller is responsible for releasing the response.

        Raises:
            TransportError: On connection, TLS or timeout failures.
        """
        try:
            return await self.session.request(
                request.method,
                request.url,
                headers=request.headers,
                auth=request.auth,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            logger.debug(
                "Transport failure",
                extra={"method": request.method, "url": str(request.url), "error": repr(exc)},
            )
            raise TransportError(
                f"{request.method} {request.url}: {str(exc) or type(exc).__name__}", cause=exc
            ) from exc

    async def close(self) -> None:
        """Close session."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
