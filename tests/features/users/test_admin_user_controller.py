"""Tests for AdminUserController."""

import json
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from neo_admin.common.exceptions import ConflictError, UserNotFoundError
from neo_admin.common.models import PaginatedRecords
from neo_admin.features.users.controllers.admin_user_controller import AdminUserController
from neo_admin.features.users.models.request import UserUpdateRequest
from tests.conftest import make_user


class TestAdminUserController:
    """Test AdminUserController."""

    @pytest.fixture
    def mock_service(self):
        service = AsyncMock()
        service.get_paginated_users.return_value = PaginatedRecords(
            records=[make_user(i) for i in range(5)],
            total_records=12,
        )
        return service

    @pytest.fixture
    def controller(self, mock_service):
        return AdminUserController(mock_service, max_limit=100)

    @pytest.mark.asyncio
    async def test_update_passes_only_sent_fields(self, controller, mock_service):
        user = make_user(0, name="Grace")
        mock_service.update_user.return_value = user
        payload = UserUpdateRequest.model_validate({"name": "Grace", "email": None})

        response = await controller.update_user(user.id, payload)

        mock_service.update_user.assert_called_once_with(user.id, {"name": "Grace"})
        assert response.status_code == 200
        body = json.loads(response.body)
        assert body["data"]["name"] == "Grace"
        assert body["message"] == "User Updated Successfully"

    @pytest.mark.asyncio
    async def test_update_not_found(self, controller, mock_service):
        mock_service.update_user.side_effect = UserNotFoundError()

        response = await controller.update_user(uuid4(), UserUpdateRequest())

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_conflict(self, controller, mock_service):
        mock_service.update_user.side_effect = ConflictError("User with this email already exists")

        response = await controller.update_user(uuid4(), UserUpdateRequest(email="taken@example.com"))

        assert response.status_code == 409
        assert json.loads(response.body)["message"] == "User with this email already exists"

    @pytest.mark.asyncio
    async def test_list_uses_parsed_page(self, controller, mock_service):
        response = await controller.list_users("2", "5")

        mock_service.get_paginated_users.assert_called_once_with(2, 5)
        body = json.loads(response.body)
        assert body["pagination"] == {"totalUsers": 12, "totalPages": 3, "currentPage": 2}
        assert len(body["users"]) == 5

    @pytest.mark.asyncio
    async def test_list_invalid_params_skip_service(self, controller, mock_service):
        response = await controller.list_users("0", None)

        assert response.status_code == 400
        mock_service.get_paginated_users.assert_not_called()

    @pytest.mark.asyncio
    async def test_list_default_limit(self, mock_service):
        controller = AdminUserController(mock_service, default_limit=10)

        await controller.list_users()

        mock_service.get_paginated_users.assert_called_once_with(1, 10)

    @pytest.mark.asyncio
    async def test_internal_error_hidden(self, mock_service):
        mock_service.get_paginated_users.side_effect = RuntimeError("pool exhausted")
        controller = AdminUserController(mock_service, expose_internal_errors=False)

        response = await controller.list_users()

        assert response.status_code == 500
        assert json.loads(response.body)["message"] == "Internal Server Error"
