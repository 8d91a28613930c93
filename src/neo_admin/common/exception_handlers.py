"""
Application exception handlers.

Errors that escape a route (request validation, typed errors raised by
dependencies, unexpected failures) are rendered with the same failure
envelope the controllers use.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import NeoAdminException
from .responses import failure_body
from .results import INTERNAL_SERVER_ERROR_MESSAGE

logger = logging.getLogger(__name__)


def format_validation_error(exc: RequestValidationError) -> str:
    """Render the first validation error as ``"<field>: <message>"``."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    message = first.get("msg", "Invalid value")
    return f"{'.'.join(location)}: {message}" if location else message


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """Register exception handlers for the application.

    Args:
        app: FastAPI application instance
        is_production: Hide unexpected error messages when True
    """

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle request validation errors as 400 Bad Request."""
        message = format_validation_error(exc)
        logger.warning(f"Validation failed for {request.method} {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=failure_body(message, status.HTTP_400_BAD_REQUEST),
        )

    @app.exception_handler(NeoAdminException)
    async def neo_exception_handler(request: Request, exc: NeoAdminException):
        """Handle typed admin API errors."""
        return JSONResponse(
            status_code=exc.status_code,
            content=failure_body(exc.message, exc.status_code),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        message = INTERNAL_SERVER_ERROR_MESSAGE if is_production else (str(exc) or INTERNAL_SERVER_ERROR_MESSAGE)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failure_body(message, status.HTTP_500_INTERNAL_SERVER_ERROR),
        )
