"""User response models.

Only the fields listed here are ever serialized for a user.
"""

from datetime import datetime
from typing import List
from uuid import UUID

from pydantic import Field

from ....common.models import BaseSchema, PageWindow
from .domain import User, UserRole


class UserResponse(BaseSchema):
    """User projection returned by the update endpoint."""

    id: UUID = Field(..., description="User ID")
    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    role: UserRole = Field(..., description="User role")
    is_verified: bool = Field(..., alias="isverified", description="Verification flag")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update timestamp")

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role,
            is_verified=user.is_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListItem(BaseSchema):
    """User projection returned by the list endpoint."""

    name: str = Field(..., description="Full name")
    email: str = Field(..., description="Email address")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")
    updated_at: datetime = Field(..., alias="updatedAt", description="Last update timestamp")

    @classmethod
    def from_domain(cls, user: User) -> "UserListItem":
        return cls(
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserPagination(BaseSchema):
    """Pagination block of the user list envelope."""

    total_users: int = Field(..., alias="totalUsers", description="Total number of users")
    total_pages: int = Field(..., alias="totalPages", description="Total number of pages")
    current_page: int = Field(..., alias="currentPage", description="Current page number")

    @classmethod
    def from_window(cls, window: PageWindow) -> "UserPagination":
        return cls(
            total_users=window.total_records,
            total_pages=window.total_pages,
            current_page=window.current_page,
        )


class UserUpdateEnvelope(BaseSchema):
    """Documented shape of a successful user update."""

    success: bool
    message: str
    data: UserResponse
    status_code: int


class UserListEnvelope(BaseSchema):
    """Documented shape of a successful user listing."""

    success: bool
    message: str
    users: List[UserListItem]
    pagination: UserPagination
    status_code: int
