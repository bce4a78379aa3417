"""
Todo API package.

A small FastAPI service exposing CRUD operations over an in-memory,
thread-safe todo store. Build an application with
``todo_api.main.create_app`` or serve the default ``todo_api.main:app``.
"""

__version__ = "0.1.0"
