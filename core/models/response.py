# =============================================================================
# core/models/response.py - Response Envelope
# =============================================================================
# Every endpoint returns the same envelope:
#
#   {"status": "ok" | "success" | "error", "message": "...", "data": ...}
#
# "data" is left out entirely when there is no payload (delete, errors).
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ResponseStatus(str, Enum):
    """
    Status tag of an APIResponse.

    - ok: Service-level checks (health)
    - success: A user operation completed
    - error: The request failed (see message)
    """
    OK = "ok"
    SUCCESS = "success"
    ERROR = "error"


class APIResponse(BaseModel):
    """Uniform response envelope returned by every endpoint."""

    status: ResponseStatus = Field(
        ...,
        description="Outcome of the request"
    )

    message: str = Field(
        ...,
        description="Human-readable description of the outcome"
    )

    data: Any | None = Field(
        default=None,
        description="Payload, omitted when not applicable"
    )

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "APIResponse":
        return cls(status=ResponseStatus.OK, message=message, data=data)

    @classmethod
    def success(cls, message: str, data: Any = None) -> "APIResponse":
        return cls(status=ResponseStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(cls, message: str) -> "APIResponse":
        return cls(status=ResponseStatus.ERROR, message=message)

    def to_content(self) -> dict[str, Any]:
        """Convert to a JSON-ready dict, dropping an absent payload."""
        return self.model_dump(mode="json", exclude_none=True)
