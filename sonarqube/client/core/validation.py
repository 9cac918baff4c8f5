"""Composable field validation primitives.

Every ``validate_*_opt`` function in the services package is a short sequence
of calls to the primitives below. Each primitive returns ``None`` when the value
is acceptable and raises ``ValidationError`` otherwise, so a validator stops at
the first violation:

    >>> validate_required(opt.project, "Project")
    >>> validate_max_length(opt.name, 128, "Name")
    >>> validate_values_authorized(opt.types, ISSUE_TYPES, "Types")

Allowed sets and bounds are always passed in by the caller.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from typing import Any

from .constants import MAX_PAGE_SIZE, MIN_PAGE_SIZE
from .enums import ValidationErrorKind
from .exceptions import ValidationError

__all__ = [
    "build_authorized_values_list",
    "is_empty",
    "validate_map_keys",
    "validate_map_values",
    "validate_max_length",
    "validate_min_length",
    "validate_mutually_exclusive",
    "validate_options_present",
    "validate_pagination",
    "validate_range",
    "validate_required",
    "validate_value_authorized",
    "validate_values_authorized",
]


def is_empty(value: Any) -> bool:
    """Return True for None, empty strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, Collection)):
        return len(value) == 0
    return False


def build_authorized_values_list(allowed: Iterable[str]) -> str:
    """Render an allowed set for error messages, sorted for stable output."""
    return ", ".join(sorted(allowed))


def validate_options_present(opt: Any, name: str = "opt") -> None:
    """Reject a missing options object for endpoints that need one."""
    if opt is None:
        raise ValidationError(
            name, "option struct is required", ValidationErrorKind.MISSING_REQUIRED
        )


def validate_required(value: Any, field: str) -> None:
    if is_empty(value):
        raise ValidationError(field, "is required", ValidationErrorKind.MISSING_REQUIRED)


def validate_max_length(value: str | None, max_len: int, field: str) -> None:
    """Reject strings longer than ``max_len`` characters."""
    if value is not None and len(value) > max_len:
        raise ValidationError(
            field,
            f"exceeds maximum length of {max_len} characters",
            ValidationErrorKind.TOO_LONG,
        )


def validate_min_length(value: str | None, min_len: int, field: str) -> None:
    """Reject non-empty strings shorter than ``min_len`` characters.

    Empty values pass; pair with ``validate_required`` when the field is mandatory.
    """
    if value and len(value) < min_len:
        raise ValidationError(
            field,
            f"must be at least {min_len} characters",
            ValidationErrorKind.TOO_SHORT,
        )


def validate_range(
    value: int | float | None,
    min_value: int | float,
    max_value: int | float,
    field: str,
) -> None:
    """Reject numbers outside the inclusive ``[min_value, max_value]`` range."""
    if value is None:
        return
    if value < min_value or value > max_value:
        raise ValidationError(
            field,
            f"must be between {min_value} and {max_value}",
            ValidationErrorKind.OUT_OF_RANGE,
        )


def validate_value_authorized(value: str | None, allowed: Collection[str], field: str) -> None:
    """Reject a single value that is not in ``allowed``. Empty values pass."""
    if not value:
        return
    if value not in allowed:
        raise ValidationError(
            field,
            f"must be one of: {build_authorized_values_list(allowed)}",
            ValidationErrorKind.INVALID_VALUE,
        )


def validate_values_authorized(
    values: Iterable[str] | None, allowed: Collection[str], field: str
) -> None:
    """Reject the first element of ``values`` that is not in ``allowed``."""
    for value in values or ():
        if value not in allowed:
            raise ValidationError(
                field,
                f"value {value!r} is not allowed. Must be one of: "
                f"{build_authorized_values_list(allowed)}",
                ValidationErrorKind.INVALID_VALUE,
            )


def validate_map_keys(
    mapping: Mapping[str, str] | None, allowed: Collection[str], field: str
) -> None:
    for key in mapping or {}:
        if key not in allowed:
            raise ValidationError(
                field,
                f"key {key!r} is not allowed. Must be one of: "
                f"{build_authorized_values_list(allowed)}",
                ValidationErrorKind.INVALID_VALUE,
            )


def validate_map_values(
    mapping: Mapping[str, str] | None, allowed: Collection[str], field: str
) -> None:
    for key, value in (mapping or {}).items():
        if value not in allowed:
            raise ValidationError(
                field,
                f"value {value!r} for key {key!r} is not allowed. Must be one of: "
                f"{build_authorized_values_list(allowed)}",
                ValidationErrorKind.INVALID_VALUE,
            )


def validate_mutually_exclusive(field_a: str, value_a: Any, field_b: str, value_b: Any) -> None:
    """Reject setting two fields the server refuses to combine."""
    if not is_empty(value_a) and not is_empty(value_b):
        raise ValidationError(
            field_a,
            f"cannot be used at the same time as {field_b}",
            ValidationErrorKind.INVALID_VALUE,
        )


def validate_pagination(
    page: int | None,
    page_size: int | None,
    max_page_size: int = MAX_PAGE_SIZE,
) -> None:
    """Validate the page index and page size of list endpoints.

    ``None`` means the parameter is not sent. A page below 1 or a page size
    outside ``[1, max_page_size]`` is rejected.
    """
    if page is not None and page < 1:
        raise ValidationError("Page", "must be greater than 0", ValidationErrorKind.OUT_OF_RANGE)
    if page_size is not None and not MIN_PAGE_SIZE <= page_size <= max_page_size:
        raise ValidationError(
            "PageSize",
            f"must be between {MIN_PAGE_SIZE} and {max_page_size}",
            ValidationErrorKind.OUT_OF_RANGE,
        )
