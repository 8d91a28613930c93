"""Admin user service for business logic."""

import logging
from typing import Any, Dict, Protocol, runtime_checkable
from uuid import UUID

from ....common.exceptions import ConflictError, UserNotFoundError
from ....common.models import PaginatedRecords
from ..models.domain import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@runtime_checkable
class AdminUserServiceProtocol(Protocol):
    """Operations the admin user controller needs from the service layer."""

    async def update_user(self, user_id: UUID, changes: Dict[str, Any]) -> User:
        """Apply a partial update to a user."""
        ...

    async def get_paginated_users(self, page: int, limit: int) -> PaginatedRecords[User]:
        """Get one page of users plus the total user count."""
        ...


class AdminUserService:
    """User service implementation for admin operations."""

    def __init__(self, user_repository: UserRepository):
        """Initialize service with repository."""
        self.repository = user_repository

    async def update_user(self, user_id: UUID, changes: Dict[str, Any]) -> User:
        """Update user with validation.

        Raises:
            UserNotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundError(user_id)

        email = changes.get("email")
        if email is not None and email.lower() != user.email.lower():
            existing = await self.repository.get_by_email(email)
            if existing and existing.id != user.id:
                raise ConflictError(
                    "User with this email already exists",
                    details={"email": email}
                )

        updated = await self.repository.update(user_id, changes)
        if not updated:
            # Deleted between the lookup and the write
            raise UserNotFoundError(user_id)

        logger.info(f"Updated user {user_id} fields: {', '.join(sorted(changes)) or '-'}")
        return updated

    async def get_paginated_users(self, page: int, limit: int) -> PaginatedRecords[User]:
        """List users for one page in creation order.

        Pages starting past the last record are returned empty without
        querying the slice, so the caller can reject them by page count.
        """
        offset = (page - 1) * limit
        total_records = await self.repository.count()
        if offset >= total_records:
            return PaginatedRecords(records=[], total_records=total_records)

        records = await self.repository.list_users(offset=offset, limit=limit)
        return PaginatedRecords(records=records, total_records=total_records)
