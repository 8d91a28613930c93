"""Base exception classes for the admin API.

Every typed error carries an explicit HTTP status code, an error code and an
``ErrorKind`` tag. Controllers never inspect the concrete class; they read the
tag through ``neo_admin.common.results``.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Tag identifying the category of a failed operation."""
    BAD_REQUEST = "bad_request"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class NeoAdminException(Exception):
    """Base exception for all admin API errors."""

    status_code: int = 500
    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}


class BadRequestError(NeoAdminException):
    """Raised when request is malformed or invalid."""
    status_code = 400
    kind = ErrorKind.BAD_REQUEST


class NotFoundError(NeoAdminException):
    """Raised when a resource is not found."""
    status_code = 404
    kind = ErrorKind.NOT_FOUND


class ConflictError(NeoAdminException):
    """Raised when there's a conflict with existing data."""
    status_code = 409
    kind = ErrorKind.CONFLICT


class InternalError(NeoAdminException):
    """Raised for unexpected failures that should surface as HTTP 500."""
    status_code = 500
    kind = ErrorKind.INTERNAL


class DatabaseError(InternalError):
    """Raised when a persistence operation fails."""
    pass
