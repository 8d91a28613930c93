"""Test configuration and fixtures for the admin API."""

from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

from neo_admin.app import create_app
from neo_admin.common.config.settings import Settings
from neo_admin.common.dependencies import (
    get_admin_organisation_service,
    get_admin_user_service,
)
from neo_admin.common.exceptions import (
    ConflictError,
    OrganisationNotFoundError,
    UserNotFoundError,
)
from neo_admin.common.models import PaginatedRecords
from neo_admin.features.organisations.models.domain import Organisation
from neo_admin.features.users.models.domain import User, UserRole

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_user(index: int = 0, **overrides) -> User:
    """Build a user created ``index`` minutes after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=index)
    values = dict(
        id=uuid4(),
        name=f"User {index}",
        email=f"user{index}@example.com",
        role=UserRole.USER,
        is_verified=False,
        created_at=created,
        updated_at=created,
    )
    values.update(overrides)
    return User(**values)


def make_organisation(**overrides) -> Organisation:
    values = dict(
        id=uuid4(),
        name="Acme Ltd",
        email="contact@acme.example",
        slug="acme",
        type="company",
        industry="Manufacturing",
        state="Lagos",
        country="Nigeria",
        address="1 Industrial Way",
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )
    values.update(overrides)
    return Organisation(**values)


class InMemoryUserService:
    """User service double keeping records in creation order."""

    def __init__(self, users: Optional[List[User]] = None):
        self.users: Dict[UUID, User] = {user.id: user for user in users or []}

    async def update_user(self, user_id: UUID, changes: Dict[str, Any]) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        email = changes.get("email")
        if email and any(other.email == email and other.id != user_id for other in self.users.values()):
            raise ConflictError("User with this email already exists")

        updated = replace(user, **changes, updated_at=datetime.now(timezone.utc))
        self.users[user_id] = updated
        return updated

    async def get_paginated_users(self, page: int, limit: int) -> PaginatedRecords[User]:
        ordered = sorted(self.users.values(), key=lambda u: (u.created_at, str(u.id)))
        start = (page - 1) * limit
        return PaginatedRecords(records=ordered[start:start + limit], total_records=len(ordered))


class InMemoryOrganisationService:
    """Organisation service double."""

    def __init__(self, organisations: Optional[List[Organisation]] = None):
        self.organisations: Dict[UUID, Organisation] = {org.id: org for org in organisations or []}

    async def update_organisation(self, organisation_id: UUID, changes: Dict[str, Any]) -> Organisation:
        organisation = self.organisations.get(organisation_id)
        if organisation is None:
            raise OrganisationNotFoundError(organisation_id)

        updated = replace(organisation, **changes, updated_at=datetime.now(timezone.utc))
        self.organisations[organisation_id] = updated
        return updated


class FakeDatabase:
    """DatabaseManager double handing out a single mocked connection."""

    def __init__(self):
        self.connection = AsyncMock()
        self.transactions = 0

    @asynccontextmanager
    async def acquire(self):
        yield self.connection

    @asynccontextmanager
    async def transaction(self):
        self.transactions += 1
        yield self.connection


@pytest.fixture
def settings():
    """Settings for a non-production test app."""
    return Settings(environment="test", cors_origins=[])


@pytest.fixture
def user_service():
    """Twelve users in creation order."""
    return InMemoryUserService([make_user(i) for i in range(12)])


@pytest.fixture
def organisation():
    return make_organisation()


@pytest.fixture
def organisation_service(organisation):
    return InMemoryOrganisationService([organisation])


@pytest.fixture
def app(settings, user_service, organisation_service):
    """Create FastAPI test app wired to in-memory services."""
    app = create_app(settings)
    app.dependency_overrides[get_admin_user_service] = lambda: user_service
    app.dependency_overrides[get_admin_organisation_service] = lambda: organisation_service
    return app


@pytest.fixture
def client(app):
    """Create test client (lifespan is not started, so no database is needed)."""
    return TestClient(app)


@pytest.fixture
def database():
    return FakeDatabase()
