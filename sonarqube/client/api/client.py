"""SonarQube API client facade.

``SonarClient`` owns the immutable connection settings and one HTTP session,
and exposes one attribute per API service:

    >>> async with SonarClient(url="https://sonar.example.com/api/", token="squ_...") as sonar:
    ...     version, _ = await sonar.server.version()
    ...     tags, _ = await sonar.project_tags.search(ProjectTagsSearchOption(query="back"))

Every service method follows the same pipeline: validate the options, build
the request with ``new_request``, and send it with ``do``. Nothing a call does
mutates the client, so one instance can serve concurrent tasks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ..runtime.rest.http_client import HTTPClient
from ..runtime.rest.request import PreparedRequest, build_request, normalize_base_url
from ..runtime.rest.transport import execute
from ..services import (
    AnalysisCacheService,
    IssuesService,
    ProjectLinksService,
    ProjectTagsService,
    QualityprofilesService,
    ServerService,
    SystemService,
)
from .config import ClientConfig

if TYPE_CHECKING:
    import aiohttp
    from pydantic import BaseModel
    from yarl import URL

logger = logging.getLogger(__name__)


class SonarClient:
    """Typed async client for the SonarQube web API."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        url: str | None = None,
        token: str | None = None,
        username: str | None = None,
        password: str | None = None,
        timeout: float | None = None,
        http_client: HTTPClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Base configuration (defaults to ``ClientConfig()``)
            url: Override of ``config.url``
            token: Override of ``config.token``
            username: Override of ``config.username``
            password: Override of ``config.password``
            timeout: Override of ``config.timeout`` in seconds
            http_client: Optional HTTP client (created from ``timeout`` if omitted)

        Raises:
            RequestConstructionError: If the base URL is not an absolute http(s) URL.
        """
        overrides = {
            key: value
            for key, value in {
                "url": url,
                "token": token,
                "username": username,
                "password": password,
                "timeout": timeout,
            }.items()
            if value is not None
        }
        base = config or ClientConfig()
        if overrides:
            base = ClientConfig.model_validate({**base.model_dump(), **overrides})

        self._config = base
        self._base_url = normalize_base_url(base.url)
        self._credentials = base.credentials()
        self._owns_http = http_client is None
        self._http = http_client or HTTPClient(timeout=base.timeout)

        self.analysis_cache = AnalysisCacheService(self)
        self.issues = IssuesService(self)
        self.project_links = ProjectLinksService(self)
        self.project_tags = ProjectTagsService(self)
        self.qualityprofiles = QualityprofilesService(self)
        self.server = ServerService(self)
        self.system = SystemService(self)

        logger.debug(
            "Client initialized",
            extra={"base_url": str(self._base_url), "auth_type": self._credentials.auth_type.value},
        )

    @classmethod
    def from_env(cls, **kwargs: Any) -> SonarClient:
        """Create a client configured from ``SONAR_*`` environment variables."""
        return cls(ClientConfig.from_env(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> URL:
        return self._base_url

    @property
    def http_client(self) -> HTTPClient:
        return self._http

    def new_request(
        self,
        method: str,
        endpoint: str,
        options: BaseModel | None = None,
    ) -> PreparedRequest:
        """Build a request for an endpoint path relative to the API root.

        Endpoints are written without a leading slash, e.g. ``"server/version"``.
        """
        return build_request(
            method,
            self._base_url,
            endpoint,
            self._credentials,
            options,
            user_agent=self._config.user_agent,
        )

    async def do(
        self,
        request: PreparedRequest,
        result_type: Any = None,
    ) -> tuple[Any, aiohttp.ClientResponse]:
        """Send a request and decode the response into ``result_type``."""
        return await execute(self._http, request, result_type)

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()

    async def __aenter__(self) -> SonarClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
