"""Core components."""

from .enums import AuthType, QueryEncoding, ResultKind, ValidationErrorKind
from .exceptions import (
    APIError,
    RequestConstructionError,
    ResponseDecodeError,
    SonarError,
    TransportError,
    ValidationError,
)

__all__ = [
    "AuthType",
    "QueryEncoding",
    "ResultKind",
    "ValidationErrorKind",
    "SonarError",
    "ValidationError",
    "RequestConstructionError",
    "TransportError",
    "ResponseDecodeError",
    "APIError",
]
