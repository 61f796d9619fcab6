"""Pydantic models shared by every route."""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    model_config = ConfigDict(extra="forbid")

    error: str


class SuccessResponse(BaseModel):
    """Body returned by delete routes."""

    success: bool = True


def require_text(value: str) -> str:
    """Reject empty or whitespace-only strings."""
    if not value.strip():
        raise ValueError("must not be empty")
    return value


# SQLite stores INTEGER keys as signed 64-bit values
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1
