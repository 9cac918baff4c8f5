"""SonarQube client - typed async access to the SonarQube web API."""

from .api import ClientConfig, SonarClient
from .core import (
    APIError,
    AuthType,
    QueryEncoding,
    RequestConstructionError,
    ResponseDecodeError,
    ResultKind,
    SonarError,
    TransportError,
    ValidationError,
    ValidationErrorKind,
)
from .models import PaginationArgs, Paging
from .runtime.rest import (
    BinaryStream,
    Credentials,
    HTTPClient,
    PreparedRequest,
    QueryEncodable,
    QueryParam,
    encode_query,
)
from .services import (
    AnalysisCacheClearOption,
    AnalysisCacheGetOption,
    IssuesAddCommentOption,
    IssuesSearchOption,
    ProjectLinksCreateOption,
    ProjectLinksDeleteOption,
    ProjectLinksSearchOption,
    ProjectTagsSearchOption,
    ProjectTagsSetOption,
    QualityprofilesActivateRuleOption,
    QualityprofilesDeactivateRuleOption,
)

__version__ = "0.1.0"

__all__ = [
    # Client
    "SonarClient",
    "ClientConfig",
    "HTTPClient",
    "Credentials",
    "PreparedRequest",
    "BinaryStream",
    # Query encoding
    "QueryParam",
    "QueryEncodable",
    "QueryEncoding",
    "encode_query",
    # Enums
    "AuthType",
    "ResultKind",
    "ValidationErrorKind",
    # Exceptions
    "SonarError",
    "ValidationError",
    "RequestConstructionError",
    "TransportError",
    "ResponseDecodeError",
    "APIError",
    # Models
    "PaginationArgs",
    "Paging",
    # Options
    "AnalysisCacheClearOption",
    "AnalysisCacheGetOption",
    "IssuesAddCommentOption",
    "IssuesSearchOption",
    "ProjectLinksCreateOption",
    "ProjectLinksDeleteOption",
    "ProjectLinksSearchOption",
    "ProjectTagsSearchOption",
    "ProjectTagsSetOption",
    "QualityprofilesActivateRuleOption",
    "QualityprofilesDeactivateRuleOption",
]
