"""
Response envelope formatting.

Success envelopes look like ``{success, message, <payload keys>, status_code}``;
failure envelopes like ``{success, status, message, status_code}``.
"""
import logging
from http import HTTPStatus
from typing import Any, Dict

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from .exceptions import ErrorKind
from .results import Failure

logger = logging.getLogger(__name__)


def status_phrase(status_code: int) -> str:
    """Lower-case HTTP reason phrase, e.g. ``"bad request"``."""
    try:
        return HTTPStatus(status_code).phrase.lower()
    except ValueError:
        return "error"


def success_body(message: str, status_code: int = 200, **payload: Any) -> Dict[str, Any]:
    """Build a success envelope."""
    return {
        "success": True,
        "message": message,
        **payload,
        "status_code": status_code,
    }


def failure_body(message: str, status_code: int) -> Dict[str, Any]:
    """Build a failure envelope."""
    return {
        "success": False,
        "status": status_phrase(status_code),
        "message": message,
        "status_code": status_code,
    }


def success_response(message: str, status_code: int = 200, **payload: Any) -> JSONResponse:
    """Create a success JSON response."""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(success_body(message, status_code, **payload)),
    )


def failure_response(failure: Failure) -> JSONResponse:
    """Create an error JSON response from a failure."""
    if failure.kind is ErrorKind.INTERNAL:
        logger.error(f"Request failed ({failure.status_code}): {failure.message}")
    else:
        logger.warning(f"Request rejected ({failure.kind.value}, {failure.status_code}): {failure.message}")

    return JSONResponse(
        status_code=failure.status_code,
        content=failure_body(failure.message, failure.status_code),
    )
