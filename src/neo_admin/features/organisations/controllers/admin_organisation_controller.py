"""Admin organisation controller."""

from uuid import UUID

from fastapi.responses import JSONResponse

from ....common.responses import failure_response, success_response
from ....common.results import run_service_call
from ..models.request import OrganisationUpdateRequest
from ..models.response import OrganisationResponse
from ..services.organisation_service import AdminOrganisationServiceProtocol


class AdminOrganisationController:
    """Handles the admin organisation endpoints."""

    def __init__(self, organisation_service: AdminOrganisationServiceProtocol, expose_internal_errors: bool = True):
        self.organisation_service = organisation_service
        self.expose_internal_errors = expose_internal_errors

    async def update_organisation(self, organisation_id: UUID, payload: OrganisationUpdateRequest) -> JSONResponse:
        """Update a single organisation."""
        result = await run_service_call(
            self.organisation_service.update_organisation(organisation_id, payload.changes()),
            expose_internal_errors=self.expose_internal_errors,
        )
        if not result.ok:
            return failure_response(result.failure)

        return success_response(
            "Organisation Updated Successfully",
            data=OrganisationResponse.from_domain(result.value),
        )
