"""Tests for the service call Result wrapper."""

import pytest

from neo_admin.common.exceptions import (
    BadRequestError,
    ConflictError,
    ErrorKind,
    NeoAdminException,
    UserNotFoundError,
)
from neo_admin.common.results import Failure, Result, run_service_call


async def _returns(value):
    return value


async def _raises(exc):
    raise exc


class TestRunServiceCall:
    """Test conversion of service outcomes into Results."""

    @pytest.mark.asyncio
    async def test_success(self):
        result = await run_service_call(_returns({"id": 1}))

        assert result.ok
        assert result.value == {"id": 1}
        assert result.failure is None

    @pytest.mark.asyncio
    async def test_typed_error_keeps_status_and_message(self):
        result = await run_service_call(_raises(UserNotFoundError()))

        assert not result.ok
        assert result.failure.kind is ErrorKind.NOT_FOUND
        assert result.failure.status_code == 404
        assert result.failure.message == "User not found"

    @pytest.mark.asyncio
    async def test_custom_status_code_is_echoed(self):
        result = await run_service_call(_raises(NeoAdminException("Gone", status_code=410)))

        assert result.failure.status_code == 410
        assert result.failure.message == "Gone"

    @pytest.mark.asyncio
    async def test_conflict(self):
        result = await run_service_call(_raises(ConflictError("Duplicate")))

        assert result.failure.kind is ErrorKind.CONFLICT
        assert result.failure.status_code == 409

    @pytest.mark.asyncio
    async def test_unexpected_error_exposes_message(self):
        result = await run_service_call(_raises(RuntimeError("connection reset")))

        assert result.failure.kind is ErrorKind.INTERNAL
        assert result.failure.status_code == 500
        assert result.failure.message == "connection reset"

    @pytest.mark.asyncio
    async def test_unexpected_error_without_message(self):
        result = await run_service_call(_raises(RuntimeError()))

        assert result.failure.message == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_unexpected_error_hidden(self):
        result = await run_service_call(
            _raises(RuntimeError("secret detail")),
            expose_internal_errors=False,
        )

        assert result.failure.message == "Internal Server Error"


def test_failure_from_exception_copies_details():
    failure = Failure.from_exception(BadRequestError("Bad", details={"field": "page"}))

    assert failure == Failure(
        kind=ErrorKind.BAD_REQUEST,
        message="Bad",
        status_code=400,
        details={"field": "page"},
    )


def test_result_constructors():
    assert Result.success(5).ok
    assert not Result.fail(Failure.internal()).ok
