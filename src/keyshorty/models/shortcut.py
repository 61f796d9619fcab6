"""Pydantic models for the Shortcut entity."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keyshorty.models.common import MAX_ROW_ID, MIN_ROW_ID, require_text


class Shortcut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    application_id: int
    key_combination: str
    description: str


class ShortcutCreate(BaseModel):
    """Request body for creating a shortcut under an existing application."""

    application_id: int = Field(ge=MIN_ROW_ID, le=MAX_ROW_ID)
    key_combination: str
    description: str

    @field_validator("key_combination", "description")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        return require_text(value)
