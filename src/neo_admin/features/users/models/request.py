"""User request models."""

from typing import Optional

from pydantic import Field, field_validator

from ....common.models import UpdateRequestSchema, normalize_email
from .domain import UserRole


class UserUpdateRequest(UpdateRequestSchema):
    """Request model for partially updating a user."""

    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Full name")
    email: Optional[str] = Field(None, max_length=320, description="Email address")
    role: Optional[UserRole] = Field(None, description="User role")
    is_verified: Optional[bool] = Field(None, alias="isverified", description="Verification flag")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Validate and normalize email format."""
        return normalize_email(v)
