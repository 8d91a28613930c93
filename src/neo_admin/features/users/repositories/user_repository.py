"""
User repository for database operations.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

import asyncpg

from ....common.database import DatabaseManager, build_update_query
from ....common.exceptions import ConflictError, DatabaseError
from ..models.domain import User, UserRole

logger = logging.getLogger(__name__)

UPDATABLE_COLUMNS = ("name", "email", "role", "is_verified")


class UserRepository:
    """Repository for user data access."""

    def __init__(self, database: DatabaseManager, schema: str = "admin"):
        """Initialize repository with database manager."""
        self.database = database
        self.table = f"{schema}.users"

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        query = f"""
            SELECT id, name, email, role, is_verified, created_at, updated_at
            FROM {self.table}
            WHERE id = $1
        """

        async with self.database.acquire() as conn:
            row = await conn.fetchrow(query, user_id)
            return self._row_to_user(row) if row else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)."""
        query = f"""
            SELECT id, name, email, role, is_verified, created_at, updated_at
            FROM {self.table}
            WHERE LOWER(email) = LOWER($1)
        """

        async with self.database.acquire() as conn:
            row = await conn.fetchrow(query, email)
            return self._row_to_user(row) if row else None

    async def update(self, user_id: UUID, changes: Dict[str, Any]) -> Optional[User]:
        """Apply a partial update and return the refreshed user.

        Returns None when no row matched the ID.
        """
        values = dict(changes)
        if isinstance(values.get("role"), UserRole):
            values["role"] = values["role"].value

        query, args = build_update_query(self.table, values, UPDATABLE_COLUMNS)

        try:
            async with self.database.transaction() as conn:
                row = await conn.fetchrow(query, user_id, *args)
        except asyncpg.UniqueViolationError as e:
            raise ConflictError(
                "User with this email already exists",
                details={"constraint": e.constraint_name}
            ) from e
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to update user {user_id}: {e}")
            raise DatabaseError("Failed to update user") from e

        return self._row_to_user(row) if row else None

    async def count(self) -> int:
        """Count all users."""
        query = f"SELECT COUNT(*) FROM {self.table}"

        async with self.database.acquire() as conn:
            return await conn.fetchval(query)

    async def list_users(self, offset: int, limit: int) -> List[User]:
        """List users in creation order."""
        query = f"""
            SELECT id, name, email, role, is_verified, created_at, updated_at
            FROM {self.table}
            ORDER BY created_at ASC, id ASC
            LIMIT $1 OFFSET $2
        """

        async with self.database.acquire() as conn:
            rows = await conn.fetch(query, limit, offset)
            return [self._row_to_user(row) for row in rows]

    def _row_to_user(self, row) -> User:
        """Convert database row to User."""
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            role=UserRole(row["role"]),
            is_verified=row["is_verified"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
