from __future__ import annotations

from .decorations import Operation, Outcome


class TodoApiError(Exception):
    """
    Base class for errors that handlers raise and the application turns into
    structured JSON responses.
    """

    status_code: int = 500
    message: str = "Internal error"
    outcome: Outcome = Outcome.INTERNAL_ERROR

    def __init__(self, operation: Operation, todo_id: str) -> None:
        super().__init__(f"{self.message} ({operation.value} {todo_id})")
        self.operation = operation
        self.todo_id = todo_id


class TodoNotFoundError(TodoApiError):
    status_code = 404
    message = "Todo not found"
    outcome = Outcome.NOT_FOUND


class TodoUpdateFailedError(TodoApiError):
    """The record disappeared between lookup and write-back during an update."""

    status_code = 500
    message = "Failed to update todo"
    outcome = Outcome.INTERNAL_ERROR
