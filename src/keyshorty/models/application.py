"""Pydantic models for the Application entity."""

from pydantic import BaseModel, ConfigDict, field_validator

from keyshorty.models.common import require_text


class Application(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class ApplicationCreate(BaseModel):
    """Request body for creating an application (server generates the id)."""

    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        return require_text(value)
