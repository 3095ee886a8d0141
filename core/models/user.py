# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: A stored user record (returned to clients)
# - UserCreate: Input for creating a new user
# - UserUpdate: Input for a partial update of an existing user
#
# IDs and timestamps are always generated server-side. Any "id" or
# "created_at" sent by a client is ignored.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A user record as held by the UserStore.

    Example:
        {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "name": "John Doe",
            "email": "john@example.com",
            "created_at": "2024-01-15T10:30:00Z"
        }
    """

    # Unique identifier, assigned once at creation
    id: str = Field(
        ...,
        description="Unique user identifier (UUID4)"
    )

    name: str = Field(
        ...,
        description="Display name"
    )

    email: str = Field(
        ...,
        description="Email address"
    )

    # When the user was created (UTC)
    created_at: datetime = Field(
        ...,
        description="Timestamp when the user was created"
    )


class UserCreate(BaseModel):
    """
    Schema for creating a new user.

    Both fields must be present. Only presence is checked: format and
    uniqueness of the email are not validated.

    Example:
        {
            "name": "John Doe",
            "email": "john@example.com"
        }
    """

    name: str = Field(
        ...,
        examples=["John Doe"],
        description="Display name"
    )

    email: str = Field(
        ...,
        examples=["john@example.com"],
        description="Email address"
    )


class UserUpdate(BaseModel):
    """
    Schema for updating a user.

    Fields that are missing, null, or empty strings leave the stored
    value unchanged. There is no way to clear a field.

    Example:
        {
            "name": "Jane Doe"
        }
    """

    name: str | None = Field(
        default=None,
        description="New display name (empty means unchanged)"
    )

    email: str | None = Field(
        default=None,
        description="New email address (empty means unchanged)"
    )
