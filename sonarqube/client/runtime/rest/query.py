"""Query string encoding for options models.

Options models are pydantic models whose fields declare their query mapping
with ``typing.Annotated``:

    >>> class ProjectTagsSetOption(BaseModel):
    ...     project: Annotated[str, QueryParam("project")] = ""
    ...     tags: Annotated[list[str], QueryParam("tags", QueryEncoding.COMMA, always=True)] = []

``encode_query`` walks the fields in declaration order and applies the
declared rule to each one:

- PLAIN: included iff the value is not a zero value (for fields defaulting to
  ``None``, iff the value is not ``None``)
- COMMA: included iff non-empty, elements joined with ``,``
- SEMICOLON_MAP: included iff non-empty, ``key=value`` entries joined with ``;``
  in key order

``always=True`` keeps an empty value in the output as ``name=``. A value that
implements ``QueryEncodable`` is encoded by its own ``to_query`` method, and
nested models without a mapping are flattened into the parent namespace.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Protocol, runtime_checkable
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ...core.enums import QueryEncoding

__all__ = [
    "QueryEncodable",
    "QueryParam",
    "encode_query",
    "format_scalar",
    "join_list",
    "join_map",
    "split_list",
    "split_map",
    "urlencode_pairs",
]

QueryPairs = list[tuple[str, str]]


@dataclass(frozen=True)
class QueryParam:
    """Query parameter mapping attached to an options field."""

    name: str
    encoding: QueryEncoding = QueryEncoding.PLAIN
    always: bool = False


@runtime_checkable
class QueryEncodable(Protocol):
    """Value that renders its own query parameters."""

    def to_query(self, name: str) -> Iterable[tuple[str, str]]: ...


def format_scalar(value: Any) -> str:
    """Return the query text form of a scalar value."""
    if isinstance(value, Enum):
        return format_scalar(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%dT%H:%M:%S%z")
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def join_list(values: Iterable[Any], separator: str = ",") -> str:
    """Join values into one string. Elements are not escaped."""
    return separator.join(format_scalar(value) for value in values)


def split_list(text: str, separator: str = ",") -> list[str]:
    if not text:
        return []
    return text.split(separator)


def join_map(
    mapping: Mapping[str, Any],
    entry_separator: str = ";",
    key_value_separator: str = "=",
) -> str:
    """Join a mapping into ``k=v;k=v`` form, sorted by key."""
    return entry_separator.join(
        f"{key}{key_value_separator}{format_scalar(mapping[key])}" for key in sorted(mapping)
    )


def split_map(
    text: str,
    entry_separator: str = ";",
    key_value_separator: str = "=",
) -> dict[str, str]:
    """Inverse of ``join_map``. Entries without a separator are dropped."""
    result: dict[str, str] = {}
    if not text:
        return result
    for entry in text.split(entry_separator):
        key, sep, value = entry.partition(key_value_separator)
        if sep:
            result[key] = value
    return result


def _is_zero(value: Any) -> bool:
    if value is None or value is False:
        return True
    if isinstance(value, (str, bytes, list, tuple, set, frozenset, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0
    return False


def _field_param(field_info: FieldInfo) -> QueryParam | None:
    for meta in field_info.metadata:
        if isinstance(meta, QueryParam):
            return meta
    return None


def _encode_field(param: QueryParam, value: Any, nullable: bool = False) -> QueryPairs:
    if isinstance(value, QueryEncodable):
        return list(value.to_query(param.name))

    if param.encoding is QueryEncoding.COMMA:
        if isinstance(value, str):
            value = [value]
        text = join_list(value or ())
    elif param.encoding is QueryEncoding.SEMICOLON_MAP:
        text = join_map(value or {})
    else:
        # Fields defaulting to None only treat None as unset, so False and 0 are sent
        unset = value is None if nullable else _is_zero(value)
        text = "" if unset else format_scalar(value)

    if text:
        return [(param.name, text)]
    if param.always:
        return [(param.name, "")]
    return []


def encode_query(options: BaseModel | None) -> QueryPairs:
    """Encode an options model into ordered ``(name, value)`` pairs."""
    if options is None:
        return []

    pairs: QueryPairs = []
    for field_name, field_info in type(options).model_fields.items():
        if field_info.exclude:
            continue
        value = getattr(options, field_name)
        param = _field_param(field_info)

        if param is None:
            if isinstance(value, BaseModel) and not isinstance(value, QueryEncodable):
                # Embedded model: same namespace as the parent
                pairs.extend(encode_query(value))
                continue
            param = QueryParam(field_name)

        pairs.extend(_encode_field(param, value, nullable=field_info.default is None))
    return pairs


def urlencode_pairs(pairs: Iterable[tuple[str, str]]) -> str:
    """Render pairs as a URL-encoded query string."""
    return urlencode(list(pairs))
