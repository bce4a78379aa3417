from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .decorations import Outcome, operation_for_method, status_emoji
from .errors import TodoApiError
from .logging_config import setup_logging
from .routers import todos as todos_router
from .settings import Settings, get_settings
from .store import InMemoryTodoStore, TodoStore
from .utils import format_validation_errors

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {"name": "todos", "description": "CRUD operations for Todo items."},
]


async def todo_api_error_handler(request: Request, exc: TodoApiError) -> JSONResponse:
    """
    Render handler-raised errors as ``{"message": ..., "status_emoji": ...}``.
    """
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "message": exc.message,
            "status_emoji": status_emoji(exc.operation, exc.outcome),
        },
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Return a 400 for request bodies that are not valid JSON or do not match the schema.

    Response format:
        {
            "message": "Invalid input",
            "error": "body.title: Field required",
            "status_emoji": "..."
        }
    """
    error = format_validation_errors(exc.errors())
    logger.warning("%s %s rejected: %s", request.method, request.url.path, error)
    return JSONResponse(
        status_code=400,
        content={
            "message": "Invalid input",
            "error": error,
            "status_emoji": status_emoji(operation_for_method(request.method), Outcome.INVALID_INPUT),
        },
    )


# PUBLIC_INTERFACE
def create_app(store: Optional[TodoStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application around a store.

    Args:
        store: Store shared by every request handler. A fresh InMemoryTodoStore is
            created when omitted, so each app (and each test) gets isolated state.
        settings: Explicit settings; read from the environment when omitted.

    Returns:
        A configured FastAPI instance.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="Minimal CRUD service for todo items backed by an in-memory store.",
        version="0.1.0",
        openapi_tags=openapi_tags,
    )
    app.state.store = store if store is not None else InMemoryTodoStore()

    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TodoApiError, todo_api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]

    @app.get("/", summary="Health Check", tags=["health"])
    def health_check(request: Request):
        """
        Health check endpoint.

        Returns:
            A JSON object indicating service health and the number of stored todos.
        """
        return {"message": "Healthy", "todos": request.app.state.store.count()}

    app.include_router(todos_router.router)
    return app


app = create_app()
