"""Project links endpoints (``api/project_links``)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, Field

from ..core.constants import MAX_LINK_NAME_LENGTH, MAX_LINK_URL_LENGTH
from ..core.enums import ValidationErrorKind
from ..core.exceptions import ValidationError
from ..core.validation import validate_max_length, validate_options_present, validate_required
from ..runtime.rest.query import QueryParam
from .base import BaseService, Options

if TYPE_CHECKING:
    import aiohttp


class ProjectLink(BaseModel):
    id: str = ""
    name: str = ""
    type: str = ""  # homepage, ci, issue, scm or a custom type
    url: str = ""


class ProjectLinksCreate(BaseModel):
    link: ProjectLink = Field(default_factory=ProjectLink)


class ProjectLinksSearch(BaseModel):
    links: list[ProjectLink] = Field(default_factory=list)


class ProjectLinksCreateOption(Options):
    """Options of ``project_links/create``.

    One of ``project_id`` or ``project_key`` identifies the project.
    """

    name: Annotated[str, QueryParam("name")] = ""
    project_id: Annotated[str, QueryParam("projectId")] = ""
    project_key: Annotated[str, QueryParam("projectKey")] = ""
    url: Annotated[str, QueryParam("url")] = ""


class ProjectLinksDeleteOption(Options):
    id: Annotated[str, QueryParam("id")] = ""


class ProjectLinksSearchOption(Options):
    project_id: Annotated[str, QueryParam("projectId")] = ""
    project_key: Annotated[str, QueryParam("projectKey")] = ""


def _validate_project_ref(project_id: str, project_key: str) -> None:
    if not project_id and not project_key:
        raise ValidationError(
            "ProjectID/ProjectKey",
            "either ProjectID or ProjectKey must be provided",
            ValidationErrorKind.MISSING_REQUIRED,
        )


class ProjectLinksService(BaseService):
    """Manage the links displayed on a project's home page."""

    def validate_create_opt(self, opt: ProjectLinksCreateOption | None) -> None:
        validate_options_present(opt)
        validate_required(opt.name, "Name")
        validate_max_length(opt.name, MAX_LINK_NAME_LENGTH, "Name")
        validate_required(opt.url, "URL")
        validate_max_length(opt.url, MAX_LINK_URL_LENGTH, "URL")
        _validate_project_ref(opt.project_id, opt.project_key)

    def validate_delete_opt(self, opt: ProjectLinksDeleteOption | None) -> None:
        validate_options_present(opt)
        validate_required(opt.id, "ID")

    def validate_search_opt(self, opt: ProjectLinksSearchOption | None) -> None:
        validate_options_present(opt)
        _validate_project_ref(opt.project_id, opt.project_key)

    async def create(
        self, opt: ProjectLinksCreateOption | None
    ) -> tuple[ProjectLinksCreate, aiohttp.ClientResponse]:
        """Create a new project link.

        Requires the 'Administer' permission on the project.

        API endpoint: POST /api/project_links/create.
        """
        self.validate_create_opt(opt)
        return await self._call("POST", "project_links/create", opt, ProjectLinksCreate)

    async def delete(self, opt: ProjectLinksDeleteOption | None) -> aiohttp.ClientResponse:
        """Delete an existing project link.

        API endpoint: POST /api/project_links/delete.
        """
        self.validate_delete_opt(opt)
        _, response = await self._call("POST", "project_links/delete", opt)
        return response

    async def search(
        self, opt: ProjectLinksSearchOption | None
    ) -> tuple[ProjectLinksSearch, aiohttp.ClientResponse]:
        """List the links of a project.

        API endpoint: GET /api/project_links/search.
        """
        self.validate_search_opt(opt)
        return await self._call("GET", "project_links/search", opt, ProjectLinksSearch)
