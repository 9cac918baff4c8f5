"""Analysis cache endpoints (``api/analysis_cache``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import Field

from ..core.validation import validate_options_present, validate_required
from ..runtime.rest.query import QueryParam
from ..runtime.rest.transport import BinaryStream
from .base import BaseService, Options

if TYPE_CHECKING:
    import aiohttp


class AnalysisCacheClearOption(Options):
    # project must be set when branch is
    branch: Annotated[str, QueryParam("branch")] = ""
    project: Annotated[str, QueryParam("project")] = ""


class AnalysisCacheGetOption(Options):
    """Options of ``analysis_cache/get``.

    ``gzip`` asks the server for a gzip-encoded body. It travels as a header,
    not as a query parameter. Use an ``HTTPClient`` created with
    ``auto_decompress=False`` to receive the compressed bytes untouched.
    """

    branch: Annotated[str, QueryParam("branch")] = ""
    project: Annotated[str, QueryParam("project")] = ""
    gzip: bool = Field(False, exclude=True)


class AnalysisCacheService(BaseService):
    """Scanner cache of a project branch."""

    def validate_clear_opt(self, opt: AnalysisCacheClearOption | None) -> None:
        if opt is None:
            return
        if opt.branch:
            validate_required(opt.project, "Project")

    def validate_get_opt(self, opt: AnalysisCacheGetOption | None) -> None:
        validate_options_present(opt)
        validate_required(opt.project, "Project")

    async def clear(self, opt: AnalysisCacheClearOption | None = None) -> aiohttp.ClientResponse:
        """Clear all or part of the scanner's cached data.

        Requires global administration permission.

        API endpoint: POST /api/analysis_cache/clear.
        """
        self.validate_clear_opt(opt)
        _, response = await self._call("POST", "analysis_cache/clear", opt)
        return response

    async def get(
        self, opt: AnalysisCacheGetOption | None
    ) -> tuple[BinaryStream, aiohttp.ClientResponse]:
        """Return the scanner's cached data for a branch as an open stream.

        The caller owns the returned stream and must close it, for example
        with ``async with stream: data = await stream.read()``.

        API endpoint: GET /api/analysis_cache/get.
        """
        self.validate_get_opt(opt)
        headers = {"Accept": "*/*"}
        if opt.gzip:
            headers["Accept-Encoding"] = "gzip"
        return await self._call(
            "GET", "analysis_cache/get", opt, result_type=BinaryStream, headers=headers
        )
