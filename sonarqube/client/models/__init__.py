"""Shared data models."""

from .paging import Paging, PaginationArgs

__all__ = ["PaginationArgs", "Paging"]
