"""Organisation models for request/response handling."""

from .domain import Organisation
from .request import OrganisationUpdateRequest
from .response import OrganisationResponse, OrganisationUpdateEnvelope

__all__ = [
    "Organisation",
    "OrganisationUpdateRequest",
    "OrganisationResponse",
    "OrganisationUpdateEnvelope",
]
