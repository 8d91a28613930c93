"""Tests for shared request validation."""

import pytest
from pydantic import ValidationError

from neo_admin.common.models import normalize_email
from neo_admin.features.organisations.models.request import OrganisationUpdateRequest
from neo_admin.features.users.models.request import UserUpdateRequest


def test_normalize_email_lowercases():
    assert normalize_email("Ada@Example.COM") == "ada@example.com"


def test_normalize_email_passes_none():
    assert normalize_email(None) is None


@pytest.mark.parametrize("value", ["plainaddress", "a@b", "two@@example.com", "sp ace@example.com"])
def test_normalize_email_rejects_malformed(value):
    with pytest.raises(ValueError):
        normalize_email(value)


@pytest.mark.parametrize("model", [UserUpdateRequest, OrganisationUpdateRequest])
def test_request_models_share_email_rules(model):
    assert model.model_validate({"email": "Ops@Acme.Example"}).email == "ops@acme.example"

    with pytest.raises(ValidationError):
        model.model_validate({"email": "not-an-email"})


class TestUpdateRequestAliases:
    """Update bodies only accept public field names."""

    def test_alias_accepted(self):
        request = UserUpdateRequest.model_validate({"isverified": True})

        assert request.changes() == {"is_verified": True}

    def test_attribute_name_rejected(self):
        with pytest.raises(ValidationError):
            UserUpdateRequest.model_validate({"is_verified": True})
