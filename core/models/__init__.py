# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User record and create/update request schemas
# - response.py: The response envelope shared by all endpoints
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# User Models
# -----------------------------------------------------------------------------
from .user import (
    User,
    UserCreate,
    UserUpdate,
)

# -----------------------------------------------------------------------------
# Response Envelope
# -----------------------------------------------------------------------------
from .response import (
    APIResponse,
    ResponseStatus,
)

__all__ = [
    # User
    "User",
    "UserCreate",
    "UserUpdate",
    # Response
    "APIResponse",
    "ResponseStatus",
]
