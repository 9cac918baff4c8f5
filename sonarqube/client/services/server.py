"""Server endpoints (``api/server``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseService

if TYPE_CHECKING:
    import aiohttp


class ServerService(BaseService):
    async def version(self) -> tuple[str, aiohttp.ClientResponse]:
        """Return the server version as plain text.

        API endpoint: GET /api/server/version.
        """
        return await self._call("GET", "server/version", result_type=str)
