"""
Common exceptions module.
"""

from .base import (
    ErrorKind,
    NeoAdminException,
    BadRequestError,
    NotFoundError,
    ConflictError,
    InternalError,
    DatabaseError,
)
from .domain import (
    UserNotFoundError,
    OrganisationNotFoundError,
    InvalidPaginationError,
    LastPageReachedError,
)

__all__ = [
    "ErrorKind",
    "NeoAdminException",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
    "DatabaseError",
    "UserNotFoundError",
    "OrganisationNotFoundError",
    "InvalidPaginationError",
    "LastPageReachedError",
]
