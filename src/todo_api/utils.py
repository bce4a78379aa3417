from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Iterable


# PUBLIC_INTERFACE
def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


# PUBLIC_INTERFACE
def new_todo_id() -> str:
    """Return a fresh random identifier for a Todo item."""
    return str(uuid.uuid4())


# PUBLIC_INTERFACE
def format_validation_errors(errors: Iterable[Dict[str, Any]]) -> str:
    """
    Flatten pydantic/FastAPI error details into a single readable message.

    Args:
        errors: The sequence returned by ``RequestValidationError.errors()``.

    Returns:
        A string like ``"body.title: Field required; body.completed: Input should be a valid boolean"``.
    """
    parts = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request body"
