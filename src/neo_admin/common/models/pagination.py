"""
Pagination models and page arithmetic.
"""

import math
from dataclasses import dataclass
from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from ..exceptions import InvalidPaginationError, LastPageReachedError
from .base import BaseSchema

T = TypeVar('T')

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5


def _parse_int(raw: Optional[str], default: int) -> int:
    """Parse a query value, falling back to ``default`` when absent or non-numeric."""
    if raw is None:
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


class PageRequest(BaseSchema):
    """Requested page and page size."""
    page: int = Field(DEFAULT_PAGE, ge=1, description="Page number")
    limit: int = Field(DEFAULT_LIMIT, ge=1, description="Items per page")

    @classmethod
    def from_query(
        cls,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: Optional[int] = None,
    ) -> "PageRequest":
        """Build a page request from raw query string values.

        Raises:
            InvalidPaginationError: If page or limit is below 1 or limit exceeds max_limit
        """
        page_value = _parse_int(page, DEFAULT_PAGE)
        limit_value = _parse_int(limit, default_limit)

        if page_value <= 0 or limit_value <= 0:
            raise InvalidPaginationError()
        if max_limit is not None and limit_value > max_limit:
            raise InvalidPaginationError()

        return cls(page=page_value, limit=limit_value)

    @property
    def offset(self) -> int:
        """Calculate offset for database query."""
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class PageWindow:
    """Total pages and current page derived from a record count."""
    total_records: int
    total_pages: int
    current_page: int

    @classmethod
    def calculate(cls, request: PageRequest, total_records: int) -> "PageWindow":
        """Compute the window and validate that the page exists.

        An empty collection has zero pages; its first page is still served
        (as an empty list) while any later page is rejected.

        Raises:
            LastPageReachedError: If the page lies beyond the last page
        """
        total_pages = math.ceil(total_records / request.limit)
        if request.page > max(total_pages, 1):
            raise LastPageReachedError(total_pages)

        return cls(
            total_records=total_records,
            total_pages=total_pages,
            current_page=request.page,
        )


@dataclass(frozen=True)
class PaginatedRecords(Generic[T]):
    """One page of records plus the total record count."""
    records: List[T]
    total_records: int
