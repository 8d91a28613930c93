"""Organisation response models."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from ....common.models import BaseSchema
from .domain import Organisation


class OrganisationResponse(BaseSchema):
    """Organisation projection returned by the update endpoint."""

    id: UUID = Field(..., description="Organisation ID")
    name: str = Field(..., description="Organisation name")
    email: str = Field(..., description="Contact email")
    slug: str = Field(..., description="URL-friendly identifier")
    type: Optional[str] = Field(None, description="Organisation type")
    industry: Optional[str] = Field(None, description="Industry")
    state: Optional[str] = Field(None, description="State or province")
    country: Optional[str] = Field(None, description="Country")
    address: Optional[str] = Field(None, description="Postal address")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_domain(cls, organisation: Organisation) -> "OrganisationResponse":
        return cls(
            id=organisation.id,
            name=organisation.name,
            email=organisation.email,
            slug=organisation.slug,
            type=organisation.type,
            industry=organisation.industry,
            state=organisation.state,
            country=organisation.country,
            address=organisation.address,
            created_at=organisation.created_at,
            updated_at=organisation.updated_at,
        )


class OrganisationUpdateEnvelope(BaseSchema):
    """Documented shape of a successful organisation update."""

    success: bool
    message: str
    data: OrganisationResponse
    status_code: int
