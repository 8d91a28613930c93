"""User services."""

from .user_service import AdminUserService, AdminUserServiceProtocol

__all__ = ["AdminUserService", "AdminUserServiceProtocol"]
