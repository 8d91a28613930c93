"""Organisation controllers."""

from .admin_organisation_controller import AdminOrganisationController

__all__ = ["AdminOrganisationController"]
