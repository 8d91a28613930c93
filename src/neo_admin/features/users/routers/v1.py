"""
Admin users API v1 router.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query
from fastapi.responses import JSONResponse

from ....common.dependencies import get_admin_user_controller
from ..controllers.admin_user_controller import AdminUserController
from ..models.request import UserUpdateRequest
from ..models.response import UserListEnvelope, UserUpdateEnvelope

router = APIRouter(tags=["Admin"])


@router.patch(
    "/{user_id}",
    response_model=UserUpdateEnvelope,
    summary="Admin-Update an existing user",
    description="Partially update a user; only the fields present in the body are changed",
    responses={
        400: {"description": "Bad Request"},
        404: {"description": "User Not Found"},
        409: {"description": "Email already in use"},
        500: {"description": "Internal Server Error"},
    },
)
async def update_user(
    payload: UserUpdateRequest,
    user_id: UUID = Path(..., description="The ID of the user to update"),
    controller: AdminUserController = Depends(get_admin_user_controller),
) -> JSONResponse:
    """Update a single user."""
    return await controller.update_user(user_id, payload)


@router.get(
    "",
    response_model=UserListEnvelope,
    summary="Admin-List users with pagination",
    description="List users in creation order, one page at a time",
    responses={
        400: {"description": "Bad Request"},
        500: {"description": "Internal Server Error"},
    },
)
async def list_users(
    page: Optional[str] = Query(None, description="Page number for pagination (default 1)"),
    limit: Optional[str] = Query(None, description="Number of users per page (default 5)"),
    controller: AdminUserController = Depends(get_admin_user_controller),
) -> JSONResponse:
    """List users with pagination."""
    return await controller.list_users(page, limit)
