"""Todo schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TodoCreate(BaseModel):
    """Create a new todo."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., alias="todoTitle")
    description: str | None = None
    due_date: datetime | None = Field(None, alias="dueDate")
    # null is accepted and stored as false
    completed: bool | None = False


class TodoUpdate(BaseModel):
    """Update a todo.

    Only fields present in the request body are applied, so ``""`` and
    ``false`` overwrite the stored value while omitted fields are kept.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = Field(None, alias="todoTitle")
    description: str | None = None
    due_date: datetime | None = Field(None, alias="dueDate")
    completed: bool | None = None


class TodoResponse(BaseModel):
    """Todo response."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str = Field(..., alias="todoTitle")
    description: str | None
    due_date: datetime | None = Field(..., alias="dueDate")
    completed: bool
    user_id: int = Field(..., alias="userId")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
