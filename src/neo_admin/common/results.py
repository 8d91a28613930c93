"""Result type returned to controllers from service calls.

``run_service_call`` awaits a service coroutine and folds any raised error
into a ``Failure`` tagged with an ``ErrorKind``, so callers branch on
``result.ok`` / ``failure.kind`` instead of on exception classes.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Dict, Generic, Optional, TypeVar

from .exceptions import ErrorKind, NeoAdminException

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTERNAL_SERVER_ERROR_MESSAGE = "Internal Server Error"


@dataclass(frozen=True)
class Failure:
    """Structured error payload of a failed operation."""

    kind: ErrorKind
    message: str
    status_code: int
    details: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: NeoAdminException) -> "Failure":
        """Build a failure from a typed error, echoing its status code."""
        return cls(
            kind=exc.kind,
            message=exc.message,
            status_code=exc.status_code,
            details=dict(exc.details),
        )

    @classmethod
    def internal(cls, exc: Optional[BaseException] = None, expose_message: bool = True) -> "Failure":
        """Build a 500 failure for an unexpected error.

        The error's own message is used only when ``expose_message`` is set and
        the message is non-empty.
        """
        message = str(exc) if (exc is not None and expose_message) else ""
        return cls(
            kind=ErrorKind.INTERNAL,
            message=message or INTERNAL_SERVER_ERROR_MESSAGE,
            status_code=500,
        )


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a failure, never both."""

    value: Optional[T] = None
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: Failure) -> "Result[T]":
        return cls(failure=failure)


async def run_service_call(call: Awaitable[T], expose_internal_errors: bool = True) -> Result[T]:
    """Await a service call and capture its outcome as a ``Result``.

    Args:
        call: Awaitable produced by a service method
        expose_internal_errors: Whether unexpected errors keep their message

    Returns:
        Result holding the awaited value or a Failure
    """
    try:
        value = await call
    except NeoAdminException as exc:
        return Result.fail(Failure.from_exception(exc))
    except Exception as exc:
        logger.error(f"Unexpected error in service call: {exc}", exc_info=True)
        return Result.fail(Failure.internal(exc, expose_message=expose_internal_errors))
    return Result.success(value)
