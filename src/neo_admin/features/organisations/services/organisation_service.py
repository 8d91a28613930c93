"""Admin organisation service for business logic."""

import logging
from typing import Any, Dict, Protocol, runtime_checkable
from uuid import UUID

from ....common.exceptions import ConflictError, OrganisationNotFoundError
from ..models.domain import Organisation
from ..repositories.organisation_repository import OrganisationRepository

logger = logging.getLogger(__name__)


@runtime_checkable
class AdminOrganisationServiceProtocol(Protocol):
    """Operations the admin organisation controller needs from the service layer."""

    async def update_organisation(self, organisation_id: UUID, changes: Dict[str, Any]) -> Organisation:
        """Apply a partial update to an organisation."""
        ...


class AdminOrganisationService:
    """Organisation service implementation for admin operations."""

    def __init__(self, organisation_repository: OrganisationRepository):
        """Initialize service with repository."""
        self.repository = organisation_repository

    async def update_organisation(self, organisation_id: UUID, changes: Dict[str, Any]) -> Organisation:
        """Update organisation with validation.

        Raises:
            OrganisationNotFoundError: If the organisation does not exist
            ConflictError: If the new slug belongs to another organisation
        """
        organisation = await self.repository.get_by_id(organisation_id)
        if not organisation:
            raise OrganisationNotFoundError(organisation_id)

        slug = changes.get("slug")
        if slug is not None and slug != organisation.slug:
            existing = await self.repository.get_by_slug(slug)
            if existing and existing.id != organisation.id:
                raise ConflictError(
                    f"Organisation with slug '{slug}' already exists",
                    details={"slug": slug}
                )

        updated = await self.repository.update(organisation_id, changes)
        if not updated:
            raise OrganisationNotFoundError(organisation_id)

        logger.info(f"Updated organisation {organisation_id} fields: {', '.join(sorted(changes)) or '-'}")
        return updated
