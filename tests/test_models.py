# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the user schemas and the response envelope:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - The envelope leaves out an absent payload
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    APIResponse,
    ResponseStatus,
    User,
    UserCreate,
    UserUpdate,
)
from lib.utils import utc_now


# =============================================================================
# User Model Tests
# =============================================================================

class TestUserCreate:
    """Tests for UserCreate model."""

    def test_valid_create(self):
        request = UserCreate(name="John Doe", email="john@example.com")

        assert request.name == "John Doe"
        assert request.email == "john@example.com"

    @pytest.mark.parametrize("data", [
        {"name": "John Doe"},
        {"email": "john@example.com"},
        {},
        {"name": None, "email": "john@example.com"},
    ])
    def test_missing_fields_raise(self, data):
        with pytest.raises(ValidationError):
            UserCreate(**data)

    def test_extra_fields_are_ignored(self):
        """Client-supplied id/created_at never reach the model."""
        request = UserCreate.model_validate({
            "id": "client-id",
            "created_at": "2000-01-01T00:00:00Z",
            "name": "John Doe",
            "email": "john@example.com",
        })

        assert "id" not in request.model_dump()
        assert "created_at" not in request.model_dump()


class TestUserUpdate:
    """Tests for UserUpdate model."""

    def test_all_fields_optional(self):
        request = UserUpdate()

        assert request.name is None
        assert request.email is None

    def test_empty_strings_are_kept(self):
        """Empty strings are valid input; the store treats them as unchanged."""
        request = UserUpdate(name="", email="")

        assert request.name == ""


class TestUser:
    """Tests for User model."""

    def test_json_round_trip(self):
        user = User(id="abc", name="A", email="a@x.com", created_at=utc_now())

        assert User.model_validate_json(user.model_dump_json()) == user


# =============================================================================
# Envelope Tests
# =============================================================================

class TestAPIResponse:
    """Tests for the response envelope."""

    def test_constructors_set_status(self):
        assert APIResponse.ok("fine").status == ResponseStatus.OK
        assert APIResponse.success("done").status == ResponseStatus.SUCCESS
        assert APIResponse.error("bad").status == ResponseStatus.ERROR

    def test_absent_data_is_omitted(self):
        assert APIResponse.success("User deleted successfully").to_content() == {
            "status": "success",
            "message": "User deleted successfully",
        }

    def test_error_has_no_data(self):
        assert APIResponse.error("User not found").to_content() == {
            "status": "error",
            "message": "User not found",
        }

    def test_empty_list_is_kept(self):
        content = APIResponse.success("Users retrieved successfully", data=[]).to_content()

        assert content["data"] == []

    def test_user_payload_is_serialized(self):
        user = User(id="abc", name="A", email="a@x.com", created_at=utc_now())

        content = APIResponse.success("ok", data=user).to_content()

        assert content["data"]["id"] == "abc"
        assert isinstance(content["data"]["created_at"], str)
