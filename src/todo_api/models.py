from __future__ import annotations

from datetime import datetime
from typing import TypedDict


# PUBLIC_INTERFACE
class TodoEntity(TypedDict):
    """
    A lightweight domain record representing a Todo item held by the store.

    Fields:
    - id: Unique string identifier (uuid4), assigned at creation and never changed
    - title: Short title; may be empty
    - completed: Boolean completion flag
    - created_at: UTC creation timestamp (aware datetime), never mutated
    - updated_at: UTC last update timestamp (aware datetime)
    """

    id: str
    title: str
    completed: bool
    created_at: datetime
    updated_at: datetime
