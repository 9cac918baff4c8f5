"""Pagination models shared by list endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import MAX_PAGE_SIZE
from ..core.validation import validate_pagination
from ..runtime.rest.query import QueryParam


class PaginationArgs(BaseModel):
    """Request-side paging, sent as ``p`` and ``ps``.

    List options subclass this model so both parameters land in the same
    query namespace as the endpoint's own fields. ``None`` leaves a parameter
    out and lets the server apply its default.
    """

    page: Annotated[int | None, QueryParam("p")] = None
    page_size: Annotated[int | None, QueryParam("ps")] = None

    model_config = ConfigDict(extra="forbid")

    def validate_pagination(self, max_page_size: int = MAX_PAGE_SIZE) -> None:
        """Raise ``ValidationError`` if page or page size is out of range."""
        validate_pagination(self.page, self.page_size, max_page_size)


class Paging(BaseModel):
    """Response-side paging block returned by list endpoints."""

    page_index: int = Field(1, alias="pageIndex", ge=1)
    page_size: int = Field(0, alias="pageSize", ge=0)
    total: int = Field(0, ge=0)

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @property
    def has_next(self) -> bool:
        if self.page_size == 0:
            return False
        return self.page_index * self.page_size < self.total
