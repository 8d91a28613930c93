"""
Domain-specific exceptions for business logic errors.
"""
from typing import Optional
from uuid import UUID

from .base import BadRequestError, NotFoundError


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, user_id: Optional[UUID] = None):
        details = {"user_id": str(user_id)} if user_id else None
        super().__init__("User not found", details=details)


class OrganisationNotFoundError(NotFoundError):
    """Raised when an organisation does not exist."""

    def __init__(self, organisation_id: Optional[UUID] = None):
        details = {"organisation_id": str(organisation_id)} if organisation_id else None
        super().__init__("Organisation not found", details=details)


class InvalidPaginationError(BadRequestError):
    """Raised when page or limit query parameters are out of range."""

    def __init__(self):
        super().__init__("Invalid query params passed")


class LastPageReachedError(BadRequestError):
    """Raised when the requested page lies beyond the last page."""

    def __init__(self, total_pages: int):
        super().__init__(
            f"last page reached page: {total_pages}",
            details={"total_pages": total_pages}
        )
        self.total_pages = total_pages
