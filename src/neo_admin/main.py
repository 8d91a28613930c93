"""Neo Admin API main entry point."""

import logging
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from .common.config.logging_config import LoggingConfig

project_root = Path.cwd()

# Load .env first (default configuration), then .env.local (local overrides)
load_dotenv(project_root / ".env")
load_dotenv(project_root / ".env.local", override=True)

# Configure logging based on environment
LoggingConfig.configure()

from .app import create_app  # noqa: E402
from .common.config.settings import get_settings  # noqa: E402

logger = logging.getLogger(__name__)

# Create the FastAPI application
app = create_app()


def main() -> None:
    """Run the application."""
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")

    uvicorn.run(
        "neo_admin.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info",
        access_log=True,
    )


if __name__ == "__main__":
    main()
