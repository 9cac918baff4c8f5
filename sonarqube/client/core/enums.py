"""Core enumerations shared by the request pipeline.

Key Types:
    - ValidationErrorKind: Why a caller-supplied value was rejected
    - QueryEncoding: How an options field is rendered into the query string
    - ResultKind: How a response body is delivered to the caller
    - AuthType: Which credentials a client sends
"""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Reason a caller-supplied value was rejected."""

    MISSING_REQUIRED = "missing_required"
    INVALID_VALUE = "invalid_value"
    OUT_OF_RANGE = "out_of_range"
    TOO_LONG = "too_long"
    TOO_SHORT = "too_short"


class QueryEncoding(str, Enum):
    """Query string rendering rule of a single options field.

    PLAIN emits the scalar text form, COMMA joins a sequence with ``,`` and
    SEMICOLON_MAP joins ``key=value`` entries with ``;``.
    """

    PLAIN = "plain"
    COMMA = "comma"
    SEMICOLON_MAP = "semicolon_map"


class ResultKind(str, Enum):
    """Delivery strategy for a response body."""

    NONE = "none"  # body ignored (void endpoints, 204)
    JSON = "json"
    TEXT = "text"
    STREAM = "stream"  # body left open for the caller


class AuthType(str, Enum):
    """Authentication scheme attached to every request."""

    NONE = "none"
    BASIC = "basic"
    TOKEN = "token"
