from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status

from ..decorations import Operation, Outcome, status_emoji
from ..errors import TodoNotFoundError, TodoUpdateFailedError
from ..models import TodoEntity
from ..schemas import (
    ErrorResponse,
    MessageResponse,
    TodoCreate,
    TodoListResponse,
    TodoMutationResponse,
    TodoOut,
    TodoResponse,
    TodoUpdate,
)
from ..store import TodoStore
from ..utils import new_todo_id, utc_now

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
)

_NOT_FOUND = {404: {"model": MessageResponse, "description": "Todo not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Invalid input"}}


# PUBLIC_INTERFACE
def get_store(request: Request) -> TodoStore:
    """
    Dependency returning the store instance attached to the running application.
    """
    return request.app.state.store


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=TodoListResponse,
    summary="List Todos",
    description="Return every Todo item currently held by the service. Order is not guaranteed.",
)
def list_todos(store: TodoStore = Depends(get_store)) -> TodoListResponse:
    todos = store.get_all()
    return TodoListResponse(
        todos=[TodoOut(**t) for t in todos],  # type: ignore[arg-type]
        status_emoji=status_emoji(Operation.LIST, Outcome.SUCCESS),
    )


# PUBLIC_INTERFACE
@router.get(
    "/{todo_id}",
    response_model=TodoResponse,
    summary="Get Todo",
    description="Get a single Todo item by ID.",
    responses=_NOT_FOUND,
)
def get_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> TodoResponse:
    """
    Retrieve a single Todo item by its ID.
    """
    item = store.get(todo_id)
    if item is None:
        raise TodoNotFoundError(Operation.GET, todo_id)
    return TodoResponse(
        todo=TodoOut(**item),  # type: ignore[arg-type]
        status_emoji=status_emoji(Operation.GET, Outcome.SUCCESS),
    )


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Todo",
    description="Create a new, not yet completed Todo item and return it.",
    responses=_INVALID,
)
def create_todo(payload: TodoCreate, store: TodoStore = Depends(get_store)) -> TodoMutationResponse:
    """
    Create a new Todo. The id and both timestamps are assigned here, not by the store.
    """
    now = utc_now()
    todo: TodoEntity = {
        "id": new_todo_id(),
        "title": payload.title,
        "completed": False,
        "created_at": now,
        "updated_at": now,
    }
    store.create(todo)
    logger.info("Created todo %s", todo["id"])
    return TodoMutationResponse(
        message="Todo created",
        todo=TodoOut(**todo),  # type: ignore[arg-type]
        status_emoji=status_emoji(Operation.CREATE, Outcome.SUCCESS),
    )


# PUBLIC_INTERFACE
@router.put(
    "/{todo_id}",
    response_model=TodoMutationResponse,
    summary="Update Todo",
    description=(
        "Partially update a Todo item. Only the fields present (and not null) in the body "
        "are changed; updated_at is always refreshed."
    ),
    responses={**_INVALID, **_NOT_FOUND, 500: {"model": MessageResponse, "description": "Update failed"}},
)
def update_todo(
    todo_id: str, payload: TodoUpdate, store: TodoStore = Depends(get_store)
) -> TodoMutationResponse:
    """
    Merge the provided fields into the stored record.

    The merge runs inside a single store lock acquisition, so concurrent updates to
    the same id cannot drop each other's fields.
    """
    if store.get(todo_id) is None:
        raise TodoNotFoundError(Operation.UPDATE, todo_id)

    def merge(current: TodoEntity) -> TodoEntity:
        if payload.title is not None:
            current["title"] = payload.title
        if payload.completed is not None:
            current["completed"] = payload.completed
        current["updated_at"] = utc_now()
        return current

    updated = store.modify(todo_id, merge)
    if updated is None:
        logger.error("Todo %s vanished between lookup and update", todo_id)
        raise TodoUpdateFailedError(Operation.UPDATE, todo_id)

    logger.info("Updated todo %s", todo_id)
    return TodoMutationResponse(
        message="Todo updated",
        todo=TodoOut(**updated),  # type: ignore[arg-type]
        status_emoji=status_emoji(Operation.UPDATE, Outcome.SUCCESS),
    )


# PUBLIC_INTERFACE
@router.delete(
    "/{todo_id}",
    response_model=MessageResponse,
    summary="Delete Todo",
    description="Delete a Todo item by ID.",
    responses=_NOT_FOUND,
)
def delete_todo(todo_id: str, store: TodoStore = Depends(get_store)) -> MessageResponse:
    """
    Delete a Todo. Returns 200 with a message on success, 404 if not found.
    """
    if not store.delete(todo_id):
        raise TodoNotFoundError(Operation.DELETE, todo_id)
    logger.info("Deleted todo %s", todo_id)
    return MessageResponse(
        message="Todo deleted",
        status_emoji=status_emoji(Operation.DELETE, Outcome.SUCCESS),
    )
