"""
Admin organisations API v1 router.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse

from ....common.dependencies import get_admin_organisation_controller
from ..controllers.admin_organisation_controller import AdminOrganisationController
from ..models.request import OrganisationUpdateRequest
from ..models.response import OrganisationUpdateEnvelope

router = APIRouter(tags=["Admin"])


@router.patch(
    "/{organisation_id}",
    response_model=OrganisationUpdateEnvelope,
    summary="Admin-Update an existing organisation",
    description="Partially update an organisation; only the fields present in the body are changed",
    responses={
        400: {"description": "Bad Request"},
        404: {"description": "Organisation Not Found"},
        409: {"description": "Slug already in use"},
        500: {"description": "Internal Server Error"},
    },
)
async def update_organisation(
    payload: OrganisationUpdateRequest,
    organisation_id: UUID = Path(..., description="The ID of the organisation to update"),
    controller: AdminOrganisationController = Depends(get_admin_organisation_controller),
) -> JSONResponse:
    """Update a single organisation."""
    return await controller.update_organisation(organisation_id, payload)
