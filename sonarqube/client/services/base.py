"""Base class shared by all API services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    import aiohttp

    from ..api.client import SonarClient


class Options(BaseModel):
    """Base model for endpoint options.

    Unknown keyword arguments are rejected so a misspelt parameter fails at
    construction instead of being silently dropped from the query.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class BaseService:
    """One group of endpoints sharing an API path prefix."""

    def __init__(self, client: SonarClient) -> None:
        self._client = client

    async def _call(
        self,
        method: str,
        endpoint: str,
        options: BaseModel | None = None,
        result_type: Any = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, aiohttp.ClientResponse]:
        request = self._client.new_request(method, endpoint, options)
        for name, value in (headers or {}).items():
            request = request.with_header(name, value)
        return await self._client.do(request, result_type)
