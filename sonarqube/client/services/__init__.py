"""API services, one module per endpoint group."""

from .analysis_cache import AnalysisCacheClearOption, AnalysisCacheGetOption, AnalysisCacheService
from .base import BaseService, Options
from .issues import (
    Issue,
    IssuesAddComment,
    IssuesAddCommentOption,
    IssuesSearch,
    IssuesSearchOption,
    IssuesService,
)
from .project_links import (
    ProjectLink,
    ProjectLinksCreate,
    ProjectLinksCreateOption,
    ProjectLinksDeleteOption,
    ProjectLinksSearch,
    ProjectLinksSearchOption,
    ProjectLinksService,
)
from .project_tags import (
    ProjectTagsSearch,
    ProjectTagsSearchOption,
    ProjectTagsService,
    ProjectTagsSetOption,
)
from .qualityprofiles import (
    QualityprofilesActivateRuleOption,
    QualityprofilesDeactivateRuleOption,
    QualityprofilesService,
)
from .server import ServerService
from .system import SystemHealth, SystemService, SystemStatus

__all__ = [
    "AnalysisCacheClearOption",
    "AnalysisCacheGetOption",
    "AnalysisCacheService",
    "BaseService",
    "Issue",
    "IssuesAddComment",
    "IssuesAddCommentOption",
    "IssuesSearch",
    "IssuesSearchOption",
    "IssuesService",
    "Options",
    "ProjectLink",
    "ProjectLinksCreate",
    "ProjectLinksCreateOption",
    "ProjectLinksDeleteOption",
    "ProjectLinksSearch",
    "ProjectLinksSearchOption",
    "ProjectLinksService",
    "ProjectTagsSearch",
    "ProjectTagsSearchOption",
    "ProjectTagsService",
    "ProjectTagsSetOption",
    "QualityprofilesActivateRuleOption",
    "QualityprofilesDeactivateRuleOption",
    "QualityprofilesService",
    "ServerService",
    "SystemHealth",
    "SystemService",
    "SystemStatus",
]
