"""Project tags endpoints (``api/project_tags``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, Field

from ..core.enums import QueryEncoding
from ..core.validation import validate_options_present, validate_required
from ..models.paging import PaginationArgs
from ..runtime.rest.query import QueryParam
from .base import BaseService, Options

if TYPE_CHECKING:
    import aiohttp


class ProjectTagsSearch(BaseModel):
    """Response of ``project_tags/search``."""

    tags: list[str] = Field(default_factory=list)


class ProjectTagsSearchOption(PaginationArgs):
    query: Annotated[str, QueryParam("q")] = ""


class ProjectTagsSetOption(Options):
    """Options of ``project_tags/set``.

    ``tags`` is always sent: an empty list clears every tag of the project.
    """

    project: Annotated[str, QueryParam("project")] = ""
    tags: Annotated[list[str], QueryParam("tags", QueryEncoding.COMMA, always=True)] = Field(
        default_factory=list
    )


class ProjectTagsService(BaseService):
    """Search tags and set the tags of a project."""

    def validate_search_opt(self, opt: ProjectTagsSearchOption | None) -> None:
        if opt is None:
            return
        opt.validate_pagination()

    def validate_set_opt(self, opt: ProjectTagsSetOption | None) -> None:
        validate_options_present(opt)
        validate_required(opt.project, "Project")

    async def search(
        self, opt: ProjectTagsSearchOption | None = None
    ) -> tuple[ProjectTagsSearch, aiohttp.ClientResponse]:
        """Search tags.

        API endpoint: GET /api/project_tags/search.
        """
        self.validate_search_opt(opt)
        return await self._call("GET", "project_tags/search", opt, ProjectTagsSearch)

    async def set(self, opt: ProjectTagsSetOption | None) -> aiohttp.ClientResponse:
        """Set the tags of a project, replacing the existing ones.

        Requires the 'Administer' right on the project.

        API endpoint: POST /api/project_tags/set.
        """
        self.validate_set_opt(opt)
        _, response = await self._call("POST", "project_tags/set", opt)
        return response
