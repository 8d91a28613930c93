"""Organisation services."""

from .organisation_service import AdminOrganisationService, AdminOrganisationServiceProtocol

__all__ = ["AdminOrganisationService", "AdminOrganisationServiceProtocol"]
