"""User controllers."""

from .admin_user_controller import AdminUserController

__all__ = ["AdminUserController"]
