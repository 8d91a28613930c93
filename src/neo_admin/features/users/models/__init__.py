"""User models for request/response handling."""

from .domain import User, UserRole
from .request import UserUpdateRequest
from .response import (
    UserListEnvelope,
    UserListItem,
    UserPagination,
    UserResponse,
    UserUpdateEnvelope,
)

__all__ = [
    "User",
    "UserRole",
    "UserUpdateRequest",
    "UserResponse",
    "UserListItem",
    "UserPagination",
    "UserUpdateEnvelope",
    "UserListEnvelope",
]
