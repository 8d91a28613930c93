"""Common models."""

from .base import BaseSchema, UpdateRequestSchema, utc_now
from .validators import EMAIL_PATTERN, normalize_email
from .pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    PageRequest,
    PageWindow,
    PaginatedRecords,
)

__all__ = [
    "BaseSchema",
    "UpdateRequestSchema",
    "utc_now",
    "EMAIL_PATTERN",
    "normalize_email",
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "PageRequest",
    "PageWindow",
    "PaginatedRecords",
]
