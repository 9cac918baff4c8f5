"""System endpoints (``api/system``)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from .base import BaseService

if TYPE_CHECKING:
    import aiohttp


class SystemStatus(BaseModel):
    """Response of ``system/status``.

    ``status`` is one of STARTING, UP, DOWN, RESTARTING, DB_MIGRATION_NEEDED
    or DB_MIGRATION_RUNNING.
    """

    id: str = ""
    status: str = ""
    version: str = ""

    @property
    def is_up(self) -> bool:
        return self.status == "UP"


class HealthCause(BaseModel):
    message: str = ""


class HealthNode(BaseModel):
    name: str = ""
    type: str = ""
    host: str = ""
    port: int | None = None
    started_at: str = Field("", alias="startedAt")
    health: str = ""
    causes: list[HealthCause] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class SystemHealth(BaseModel):
    """Response of ``system/health``. ``health`` is GREEN, YELLOW or RED."""

    health: str = ""
    causes: list[HealthCause] = Field(default_factory=list)
    nodes: list[HealthNode] = Field(default_factory=list)


class SystemService(BaseService):
    async def ping(self) -> tuple[str, aiohttp.ClientResponse]:
        """Answer "pong" as plain text.

        API endpoint: GET /api/system/ping.
        """
        return await self._call("GET", "system/ping", result_type=str)

    async def status(self) -> tuple[SystemStatus, aiohttp.ClientResponse]:
        """Return the server id, version and running status.

        API endpoint: GET /api/system/status.
        """
        return await self._call("GET", "system/status", result_type=SystemStatus)

    async def health(self) -> tuple[SystemHealth, aiohttp.ClientResponse]:
        """Return the health of the server and, in a cluster, of each node.

        Requires system passcode or 'Administer System' permission.

        API endpoint: GET /api/system/health.
        """
        return await self._call("GET", "system/health", result_type=SystemHealth)
