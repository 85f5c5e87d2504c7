"""Pydantic schemas for Todo API.

Wire names are camelCase (``dueAt``, ``createdAt``); Python code uses the
snake_case attribute names.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel

from domain.entities.todo import TodoStatus


class TodoPayload(BaseModel):
    """Body of create (POST) and replace (PUT) requests.

    On PUT every field except ``dueAt`` overwrites the stored value, so an
    omitted ``note`` clears it and an omitted ``status`` resets to pending.
    A missing or null ``title`` is stored as an empty string.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "Buy milk",
                "note": "2 liters, low fat",
                "dueAt": "2026-11-02T09:00:00+07:00",
                "status": "pending",
            }
        },
    )

    title: str = Field("", max_length=255)
    note: str | None = None
    due_at: datetime | None = None
    status: TodoStatus | None = None

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def blank_status_is_unset(cls, v: object) -> object:
        return None if v == "" else v


class TogglePayload(BaseModel):
    """Body of the complete/undo request."""

    completed: StrictBool = False


class TodoResponse(BaseModel):
    """Schema for Todo response."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Buy milk",
                "note": None,
                "dueAt": "2026-11-02T02:00:00Z",
                "status": "pending",
                "createdAt": "2026-10-18T10:00:00Z",
                "updatedAt": "2026-10-18T10:00:00Z",
            }
        },
    )

    id: UUID
    title: str
    note: str | None
    due_at: datetime | None
    status: TodoStatus
    created_at: datetime
    updated_at: datetime
