"""Admin user controller.

Parses request input, delegates to the injected service and shapes the
response envelope.
"""

from typing import List, Optional, Tuple
from uuid import UUID

from fastapi.responses import JSONResponse

from ....common.models import DEFAULT_LIMIT, PageRequest, PageWindow
from ....common.responses import failure_response, success_response
from ....common.results import run_service_call
from ..models.domain import User
from ..models.request import UserUpdateRequest
from ..models.response import UserListItem, UserPagination, UserResponse
from ..services.user_service import AdminUserServiceProtocol


class AdminUserController:
    """Handles the admin user endpoints."""

    def __init__(
        self,
        user_service: AdminUserServiceProtocol,
        expose_internal_errors: bool = True,
        default_limit: int = DEFAULT_LIMIT,
        max_limit: Optional[int] = None,
    ):
        self.user_service = user_service
        self.expose_internal_errors = expose_internal_errors
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def update_user(self, user_id: UUID, payload: UserUpdateRequest) -> JSONResponse:
        """Update a single user."""
        result = await run_service_call(
            self.user_service.update_user(user_id, payload.changes()),
            expose_internal_errors=self.expose_internal_errors,
        )
        if not result.ok:
            return failure_response(result.failure)

        return success_response(
            "User Updated Successfully",
            data=UserResponse.from_domain(result.value),
        )

    async def list_users(self, page: Optional[str] = None, limit: Optional[str] = None) -> JSONResponse:
        """List users with pagination."""
        result = await run_service_call(
            self._fetch_page(page, limit),
            expose_internal_errors=self.expose_internal_errors,
        )
        if not result.ok:
            return failure_response(result.failure)

        users, window = result.value
        return success_response(
            "Users retrieved successfully",
            users=[UserListItem.from_domain(user) for user in users],
            pagination=UserPagination.from_window(window),
        )

    async def _fetch_page(self, page: Optional[str], limit: Optional[str]) -> Tuple[List[User], PageWindow]:
        request = PageRequest.from_query(
            page,
            limit,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
        )
        paginated = await self.user_service.get_paginated_users(request.page, request.limit)
        window = PageWindow.calculate(request, paginated.total_records)
        return paginated.records, window
