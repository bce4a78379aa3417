"""
Display-only status tokens attached to API responses.

The ``status_emoji`` field signals the outcome category to a human reader.
It never influences status codes or store behavior.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict


class Operation(str, Enum):
    LIST = "list"
    GET = "get"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class Outcome(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    INTERNAL_ERROR = "internal_error"


_SUCCESS_TOKENS: Dict[Operation, str] = {
    Operation.LIST: "📋",
    Operation.GET: "👀",
    Operation.CREATE: "✨",
    Operation.UPDATE: "📝",
    Operation.DELETE: "🗑️",
}

_FAILURE_TOKENS: Dict[Outcome, str] = {
    Outcome.NOT_FOUND: "🔍",
    Outcome.INVALID_INPUT: "🚫",
    Outcome.INTERNAL_ERROR: "💥",
}

_METHOD_OPERATIONS: Dict[str, Operation] = {
    "POST": Operation.CREATE,
    "PUT": Operation.UPDATE,
    "PATCH": Operation.UPDATE,
    "DELETE": Operation.DELETE,
}


# PUBLIC_INTERFACE
def status_emoji(operation: Operation, outcome: Outcome) -> str:
    """
    Return the display token for an operation outcome.

    Successful outcomes are told apart by operation (created, updated, ...);
    failures are told apart by outcome (not found, invalid input, ...).
    """
    if outcome is Outcome.SUCCESS:
        return _SUCCESS_TOKENS[operation]
    return _FAILURE_TOKENS[outcome]


# PUBLIC_INTERFACE
def operation_for_method(method: str) -> Operation:
    """Map an HTTP method to the operation kind it performs on /todos."""
    return _METHOD_OPERATIONS.get(method.upper(), Operation.GET)
