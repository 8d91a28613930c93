"""User domain models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID


class UserRole(str, Enum):
    """Roles a platform user can hold."""
    USER = "user"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


@dataclass
class User:
    """Persisted user record."""
    id: UUID
    name: str
    email: str
    role: UserRole
    is_verified: bool
    created_at: datetime
    updated_at: datetime
