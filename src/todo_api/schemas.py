from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TodoCreate(BaseModel):
    """
    Schema for creating a new Todo item.
    The title must be a JSON string; an empty string is accepted.
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"example": {"title": "Buy milk"}},
    )

    title: str = Field(..., description="Short title for the todo item")


# PUBLIC_INTERFACE
class TodoUpdate(BaseModel):
    """
    Schema for partially updating an existing Todo item.
    Both fields are optional; a missing or null field leaves the stored value untouched.
    """

    model_config = ConfigDict(
        strict=True,
        json_schema_extra={"example": {"completed": True}},
    )

    title: Optional[str] = Field(default=None, description="New title, if changing it")
    completed: Optional[bool] = Field(default=None, description="New completion flag, if changing it")


# PUBLIC_INTERFACE
class TodoOut(BaseModel):
    """
    Schema returned by the API for a Todo item.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0b8f6d1e-52a4-4f36-9d0e-0f5f3c1b7a21",
                "title": "Buy milk",
                "completed": False,
                "created_at": "2025-01-25T10:15:30.123456Z",
                "updated_at": "2025-01-26T09:00:00.000001Z",
            }
        }
    )

    id: str = Field(..., description="Unique identifier of the todo item")
    title: str = Field(..., description="Short title for the todo item")
    completed: bool = Field(..., description="Completion status flag")
    created_at: datetime = Field(..., description="Creation timestamp (RFC3339, UTC)")
    updated_at: datetime = Field(..., description="Last update timestamp (RFC3339, UTC)")


class DecoratedResponse(BaseModel):
    status_emoji: str = Field(..., description="Display-only outcome indicator")


# PUBLIC_INTERFACE
class TodoListResponse(DecoratedResponse):
    """Envelope for the list endpoint."""

    todos: List[TodoOut] = Field(..., description="All current Todo items, unordered")


# PUBLIC_INTERFACE
class TodoResponse(DecoratedResponse):
    """Envelope for a single fetched Todo item."""

    todo: TodoOut


# PUBLIC_INTERFACE
class TodoMutationResponse(DecoratedResponse):
    """Envelope for create and update results."""

    message: str = Field(..., description="Human readable outcome")
    todo: TodoOut


# PUBLIC_INTERFACE
class MessageResponse(DecoratedResponse):
    """Envelope carrying only a message (delete, not found, internal error)."""

    message: str


# PUBLIC_INTERFACE
class ErrorResponse(DecoratedResponse):
    """Envelope for rejected request bodies."""

    message: str
    error: str = Field(..., description="Why the body could not be parsed")
