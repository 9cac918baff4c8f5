"""Issue endpoints (``api/issues``)."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..core.constants import (
    CLEAN_CODE_ATTRIBUTE_CATEGORIES,
    IMPACT_SEVERITIES,
    ISSUE_RESOLUTIONS,
    ISSUE_SCOPES,
    ISSUE_STATUSES,
    ISSUE_TYPES,
    LANGUAGES,
    SEVERITIES,
    SOFTWARE_QUALITIES,
)
from ..core.enums import QueryEncoding
from ..core.validation import (
    validate_options_present,
    validate_required,
    validate_values_authorized,
)
from ..models.paging import PaginationArgs, Paging
from ..runtime.rest.query import QueryParam
from .base import BaseService, Options

if TYPE_CHECKING:
    import aiohttp

CommaList = Annotated[list[str], Field(default_factory=list)]


class _ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TextRange(_ApiModel):
    start_line: int = 0
    end_line: int = 0
    start_offset: int = 0
    end_offset: int = 0


class IssueComment(_ApiModel):
    key: str = ""
    login: str = ""
    html_text: str = ""
    markdown: str = ""
    created_at: str = ""
    updatable: bool = False


class IssueImpact(_ApiModel):
    software_quality: str = ""
    severity: str = ""


class Issue(_ApiModel):
    """One issue as returned by the issue endpoints."""

    key: str = ""
    component: str = ""
    project: str = ""
    rule: str = ""
    message: str = ""
    line: int | None = None
    hash: str = ""
    status: str = ""
    issue_status: str = ""
    resolution: str = ""
    severity: str = ""
    type: str = ""
    author: str = ""
    assignee: str = ""
    effort: str = ""
    creation_date: str = ""
    update_date: str = ""
    clean_code_attribute: str = ""
    clean_code_attribute_category: str = ""
    text_range: TextRange | None = None
    tags: list[str] = Field(default_factory=list)
    comments: list[IssueComment] = Field(default_factory=list)
    impacts: list[IssueImpact] = Field(default_factory=list)
    transitions: list[str] = Field(default_factory=list)
    actions: list[str] = Field(default_factory=list)
    quick_fix_available: bool = False
    prioritized_rule: bool = False


class IssueComponent(_ApiModel):
    key: str = ""
    name: str = ""
    qualifier: str = ""
    path: str = ""
    enabled: bool = True


class IssueRule(_ApiModel):
    key: str = ""
    name: str = ""
    lang: str = ""
    lang_name: str = ""
    status: str = ""


class IssueUser(_ApiModel):
    login: str = ""
    name: str = ""
    active: bool = True


class IssuesSearch(_ApiModel):
    """Response of ``issues/search``."""

    paging: Paging = Field(default_factory=Paging)
    issues: list[Issue] = Field(default_factory=list)
    components: list[IssueComponent] = Field(default_factory=list)
    rules: list[IssueRule] = Field(default_factory=list)
    users: list[IssueUser] = Field(default_factory=list)


class IssuesAddComment(_ApiModel):
    issue: Issue = Field(default_factory=Issue)
    components: list[IssueComponent] = Field(default_factory=list)
    rules: list[IssueRule] = Field(default_factory=list)
    users: list[IssueUser] = Field(default_factory=list)


class IssuesSearchOption(PaginationArgs):
    """Options of ``issues/search``.

    List filters are sent comma-separated. ``resolved`` and ``assigned`` are
    tri-state: ``None`` leaves the filter out, ``False`` sends ``false``.
    """

    additional_fields: Annotated[CommaList, QueryParam("additionalFields", QueryEncoding.COMMA)]
    assigned: Annotated[bool | None, QueryParam("assigned")] = None
    assignees: Annotated[CommaList, QueryParam("assignees", QueryEncoding.COMMA)]
    author: Annotated[str, QueryParam("author")] = ""
    branch: Annotated[str, QueryParam("branch")] = ""
    clean_code_attribute_categories: Annotated[
        CommaList, QueryParam("cleanCodeAttributeCategories", QueryEncoding.COMMA)
    ]
    components: Annotated[CommaList, QueryParam("components", QueryEncoding.COMMA)]
    created_after: Annotated[date | datetime | None, QueryParam("createdAfter")] = None
    created_before: Annotated[date | datetime | None, QueryParam("createdBefore")] = None
    created_in_last: Annotated[str, QueryParam("createdInLast")] = ""
    facets: Annotated[CommaList, QueryParam("facets", QueryEncoding.COMMA)]
    impact_severities: Annotated[CommaList, QueryParam("impactSeverities", QueryEncoding.COMMA)]
    impact_software_qualities: Annotated[
        CommaList, QueryParam("impactSoftwareQualities", QueryEncoding.COMMA)
    ]
    in_new_code_period: Annotated[bool, QueryParam("inNewCodePeriod")] = False
    issue_statuses: Annotated[CommaList, QueryParam("issueStatuses", QueryEncoding.COMMA)]
    issues: Annotated[CommaList, QueryParam("issues", QueryEncoding.COMMA)]
    languages: Annotated[CommaList, QueryParam("languages", QueryEncoding.COMMA)]
    projects: Annotated[CommaList, QueryParam("projects", QueryEncoding.COMMA)]
    pull_request: Annotated[str, QueryParam("pullRequest")] = ""
    resolutions: Annotated[CommaList, QueryParam("resolutions", QueryEncoding.COMMA)]
    resolved: Annotated[bool | None, QueryParam("resolved")] = None
    rules: Annotated[CommaList, QueryParam("rules", QueryEncoding.COMMA)]
    scopes: Annotated[CommaList, QueryParam("scopes", QueryEncoding.COMMA)]
    severities: Annotated[CommaList, QueryParam("severities", QueryEncoding.COMMA)]
    sort: Annotated[str, QueryParam("s")] = ""
    asc: Annotated[bool | None, QueryParam("asc")] = None
    statuses: Annotated[CommaList, QueryParam("statuses", QueryEncoding.COMMA)]
    tags: Annotated[CommaList, QueryParam("tags", QueryEncoding.COMMA)]
    types: Annotated[CommaList, QueryParam("types", QueryEncoding.COMMA)]


class IssuesAddCommentOption(Options):
    issue: Annotated[str, QueryParam("issue")] = ""
    text: Annotated[str, QueryParam("text")] = ""


class IssuesService(BaseService):
    """Search issues and comment on them."""

    def validate_search_opt(self, opt: IssuesSearchOption | None) -> None:
        if opt is None:
            return
        opt.validate_pagination()
        validate_values_authorized(opt.impact_severities, IMPACT_SEVERITIES, "ImpactSeverities")
        validate_values_authorized(
            opt.impact_software_qualities, SOFTWARE_QUALITIES, "ImpactSoftwareQualities"
        )
        validate_values_authorized(
            opt.clean_code_attribute_categories,
            CLEAN_CODE_ATTRIBUTE_CATEGORIES,
            "CleanCodeAttributeCategories",
        )
        validate_values_authorized(opt.severities, SEVERITIES, "Severities")
        validate_values_authorized(opt.types, ISSUE_TYPES, "Types")
        validate_values_authorized(opt.statuses, ISSUE_STATUSES, "Statuses")
        validate_values_authorized(opt.issue_statuses, ISSUE_STATUSES, "IssueStatuses")
        validate_values_authorized(opt.resolutions, ISSUE_RESOLUTIONS, "Resolutions")
        validate_values_authorized(opt.scopes, ISSUE_SCOPES, "Scopes")
        validate_values_authorized(opt.languages, LANGUAGES, "Languages")

    def validate_add_comment_opt(self, opt: IssuesAddCommentOption | None) -> None:
        validate_options_present(opt)
        validate_required(opt.issue, "Issue")
        validate_required(opt.text, "Text")

    async def search(
        self, opt: IssuesSearchOption | None = None
    ) -> tuple[IssuesSearch, aiohttp.ClientResponse]:
        """Search for issues.

        Requires the 'Browse' permission on the specified projects.

        API endpoint: GET /api/issues/search.
        """
        self.validate_search_opt(opt)
        return await self._call("GET", "issues/search", opt, IssuesSearch)

    async def add_comment(
        self, opt: IssuesAddCommentOption | None
    ) -> tuple[IssuesAddComment, aiohttp.ClientResponse]:
        """Add a comment to an issue.

        API endpoint: POST /api/issues/add_comment.
        """
        self.validate_add_comment_opt(opt)
        return await self._call("POST", "issues/add_comment", opt, IssuesAddComment)
