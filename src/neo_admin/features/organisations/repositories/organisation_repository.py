"""Organisation repository for data access."""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

import asyncpg

from ....common.database import DatabaseManager, build_update_query
from ....common.exceptions import ConflictError, DatabaseError
from ..models.domain import Organisation

logger = logging.getLogger(__name__)

UPDATABLE_COLUMNS = ("name", "email", "slug", "type", "industry", "state", "country", "address")

SELECT_COLUMNS = "id, name, email, slug, type, industry, state, country, address, created_at, updated_at"


def _conflict_message(constraint_name: Optional[str]) -> str:
    """Name the duplicated column when the constraint identifies it."""
    for column in ("slug", "email"):
        if constraint_name and column in constraint_name:
            return f"Organisation with this {column} already exists"
    return "Organisation already exists"


class OrganisationRepository:
    """Organisation repository implementation using asyncpg."""

    def __init__(self, database: DatabaseManager, schema: str = "admin"):
        """Initialize repository with database manager."""
        self.database = database
        self.table = f"{schema}.organisations"

    async def get_by_id(self, organisation_id: UUID) -> Optional[Organisation]:
        """Get organisation by ID."""
        query = f"""
            SELECT {SELECT_COLUMNS} FROM {self.table}
            WHERE id = $1
        """

        async with self.database.acquire() as conn:
            row = await conn.fetchrow(query, organisation_id)
            return self._row_to_organisation(row) if row else None

    async def get_by_slug(self, slug: str) -> Optional[Organisation]:
        """Get organisation by slug."""
        query = f"""
            SELECT {SELECT_COLUMNS} FROM {self.table}
            WHERE slug = $1
        """

        async with self.database.acquire() as conn:
            row = await conn.fetchrow(query, slug)
            return self._row_to_organisation(row) if row else None

    async def update(self, organisation_id: UUID, changes: Dict[str, Any]) -> Optional[Organisation]:
        """Apply a partial update and return the refreshed organisation.

        Returns None when no row matched the ID.
        """
        query, args = build_update_query(self.table, changes, UPDATABLE_COLUMNS)

        try:
            async with self.database.transaction() as conn:
                row = await conn.fetchrow(query, organisation_id, *args)
        except asyncpg.UniqueViolationError as e:
            raise ConflictError(
                _conflict_message(e.constraint_name),
                details={"constraint": e.constraint_name}
            ) from e
        except asyncpg.PostgresError as e:
            logger.error(f"Failed to update organisation {organisation_id}: {e}")
            raise DatabaseError("Failed to update organisation") from e

        return self._row_to_organisation(row) if row else None

    def _row_to_organisation(self, row) -> Organisation:
        """Convert database row to Organisation."""
        return Organisation(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            slug=row["slug"],
            type=row["type"],
            industry=row["industry"],
            state=row["state"],
            country=row["country"],
            address=row["address"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
