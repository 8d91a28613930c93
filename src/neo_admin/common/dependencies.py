"""Common FastAPI dependencies.

Builds the production object graph (database manager -> repository ->
service -> controller). Tests replace ``get_admin_user_service`` or
``get_admin_organisation_service`` through ``app.dependency_overrides``.
"""

from fastapi import Depends, Request

from .config.settings import Settings
from .database.connection import DatabaseManager
from ..features.organisations.controllers.admin_organisation_controller import AdminOrganisationController
from ..features.organisations.repositories.organisation_repository import OrganisationRepository
from ..features.organisations.services.organisation_service import (
    AdminOrganisationService,
    AdminOrganisationServiceProtocol,
)
from ..features.users.controllers.admin_user_controller import AdminUserController
from ..features.users.repositories.user_repository import UserRepository
from ..features.users.services.user_service import AdminUserService, AdminUserServiceProtocol


def get_app_settings(request: Request) -> Settings:
    """Get the settings the application was created with."""
    return request.app.state.settings


def get_database_manager(request: Request) -> DatabaseManager:
    """Get the database manager owned by the application."""
    return request.app.state.database_manager


# Service Dependencies

async def get_admin_user_service(
    database: DatabaseManager = Depends(get_database_manager),
    settings: Settings = Depends(get_app_settings),
) -> AdminUserServiceProtocol:
    """Get admin user service with dependency injection."""
    repository = UserRepository(database, schema=settings.db_schema)
    return AdminUserService(repository)


async def get_admin_organisation_service(
    database: DatabaseManager = Depends(get_database_manager),
    settings: Settings = Depends(get_app_settings),
) -> AdminOrganisationServiceProtocol:
    """Get admin organisation service with dependency injection."""
    repository = OrganisationRepository(database, schema=settings.db_schema)
    return AdminOrganisationService(repository)


# Controller Dependencies

async def get_admin_user_controller(
    service: AdminUserServiceProtocol = Depends(get_admin_user_service),
    settings: Settings = Depends(get_app_settings),
) -> AdminUserController:
    """Get admin user controller bound to the configured service."""
    return AdminUserController(
        service,
        expose_internal_errors=not settings.is_production,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )


async def get_admin_organisation_controller(
    service: AdminOrganisationServiceProtocol = Depends(get_admin_organisation_service),
    settings: Settings = Depends(get_app_settings),
) -> AdminOrganisationController:
    """Get admin organisation controller bound to the configured service."""
    return AdminOrganisationController(
        service,
        expose_internal_errors=not settings.is_production,
    )
