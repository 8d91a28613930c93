"""Organisation repositories."""

from .organisation_repository import OrganisationRepository

__all__ = ["OrganisationRepository"]
