"""
Base models for API requests and responses.
"""
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        use_enum_values=True,
        validate_assignment=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class UpdateRequestSchema(BaseSchema):
    """Base for partial-update request bodies.

    Unknown fields are rejected and fields are only accepted under their
    public (alias) name. ``changes()`` returns only the fields the
    client actually sent with a non-null value.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=False)

    def changes(self) -> dict:
        """Get the provided fields keyed by attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True, by_alias=False)
