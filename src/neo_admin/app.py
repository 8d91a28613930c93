"""Neo Admin API application factory."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .common.config.settings import Settings, get_settings
from .common.database.connection import DatabaseManager
from .common.exception_handlers import register_exception_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    database_manager: DatabaseManager = app.state.database_manager

    await database_manager.create_pool()
    logger.info("Admin API started")

    yield

    await database_manager.close_pool()
    logger.info("Admin API stopped")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create the Neo Admin API.

    Args:
        settings: Settings to use instead of the cached environment settings

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Neo Admin API",
        version=settings.app_version,
        description="Admin API for organisation and user management",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database_manager = DatabaseManager.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, is_production=settings.is_production)

    from .features.organisations.routers.v1 import router as organisations_router
    app.include_router(organisations_router, prefix=f"{settings.api_prefix}/admin/organisation")

    from .features.users.routers.v1 import router as users_router
    app.include_router(users_router, prefix=f"{settings.api_prefix}/admin/users")

    from .features.system.routers.v1 import router as system_router
    app.include_router(system_router, prefix=f"{settings.api_prefix}/system")

    logger.info(f"Created {settings.app_name} ({settings.environment})")
    return app
