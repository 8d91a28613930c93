"""Organisation request models."""

import re
from typing import Optional

from pydantic import Field, field_validator

from ....common.models import UpdateRequestSchema, normalize_email

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


class OrganisationUpdateRequest(UpdateRequestSchema):
    """Request model for partially updating an organisation."""

    name: Optional[str] = Field(None, min_length=1, max_length=255, description="Organisation name")
    email: Optional[str] = Field(None, max_length=320, description="Contact email")
    slug: Optional[str] = Field(None, min_length=1, max_length=100, description="URL-friendly identifier")
    type: Optional[str] = Field(None, max_length=100, description="Organisation type")
    industry: Optional[str] = Field(None, max_length=100, description="Industry")
    state: Optional[str] = Field(None, max_length=100, description="State or province")
    country: Optional[str] = Field(None, max_length=100, description="Country")
    address: Optional[str] = Field(None, max_length=500, description="Postal address")

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Validate and normalize email format."""
        return normalize_email(v)

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: Optional[str]) -> Optional[str]:
        """Slugs are lower-case words joined by single hyphens."""
        if v is None:
            return v
        if not SLUG_PATTERN.match(v):
            raise ValueError("Slug must contain lowercase letters, digits and single hyphens")
        return v
