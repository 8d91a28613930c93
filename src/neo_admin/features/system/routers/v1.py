"""System-level API endpoints."""

import time

from fastapi import APIRouter, Depends

from ....__version__ import __version__
from ....common.config.settings import Settings
from ....common.database.connection import DatabaseManager
from ....common.dependencies import get_app_settings, get_database_manager
from ....common.models.base import utc_now

router = APIRouter(tags=["System"])

# Track application start time
_start_time = time.time()


@router.get("/health", summary="Service health check")
async def get_system_health(
    database: DatabaseManager = Depends(get_database_manager),
    settings: Settings = Depends(get_app_settings),
):
    """Report service liveness and database reachability."""
    database_ok = await database.health_check()

    return {
        "status": "healthy" if database_ok else "degraded",
        "database": database_ok,
        "app_name": settings.app_name,
        "version": __version__,
        "environment": settings.environment,
        "uptime_seconds": round(time.time() - _start_time, 3),
        "timestamp": utc_now().isoformat(),
    }
