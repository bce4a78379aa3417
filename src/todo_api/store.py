from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from threading import RLock
from typing import Callable, Dict, List, Optional

from .models import TodoEntity

logger = logging.getLogger(__name__)

TodoMutator = Callable[[TodoEntity], TodoEntity]


# PUBLIC_INTERFACE
class TodoStore(ABC):
    """Abstract store contract for todo records keyed by id."""

    @abstractmethod
    def get_all(self) -> List[TodoEntity]:
        """Return all current records. Order is not guaranteed."""

    @abstractmethod
    def get(self, todo_id: str) -> Optional[TodoEntity]:
        """Return the record with this exact id, or None if absent."""

    @abstractmethod
    def create(self, todo: TodoEntity) -> None:
        """Insert a record keyed by its id, overwriting any record with the same id."""

    @abstractmethod
    def update(self, todo_id: str, todo: TodoEntity) -> bool:
        """Replace the whole record at todo_id. Return False (no change) if absent."""

    @abstractmethod
    def delete(self, todo_id: str) -> bool:
        """Remove the record at todo_id. Return True if removed, False if absent."""

    @abstractmethod
    def modify(self, todo_id: str, mutator: TodoMutator) -> Optional[TodoEntity]:
        """
        Atomically read, transform and write back the record at todo_id.

        The mutator receives a copy of the current record and returns the record
        to store. Returns the stored record, or None if todo_id is absent (the
        mutator is then not called).
        """

    @abstractmethod
    def count(self) -> int:
        """Return the number of live records."""


class InMemoryTodoStore(TodoStore):
    """
    Thread-safe in-memory store. A single lock guards the whole collection and
    records are copied on the way in and on the way out.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._items: Dict[str, TodoEntity] = {}

    def get_all(self) -> List[TodoEntity]:
        with self._lock:
            return [t.copy() for t in self._items.values()]

    def get(self, todo_id: str) -> Optional[TodoEntity]:
        with self._lock:
            item = self._items.get(todo_id)
            return None if item is None else item.copy()

    def create(self, todo: TodoEntity) -> None:
        with self._lock:
            if todo["id"] in self._items:
                logger.debug("Overwriting existing todo %s on create", todo["id"])
            self._items[todo["id"]] = todo.copy()
        logger.debug("Stored todo %s", todo["id"])

    def update(self, todo_id: str, todo: TodoEntity) -> bool:
        with self._lock:
            if todo_id not in self._items:
                return False
            self._items[todo_id] = todo.copy()
        logger.debug("Replaced todo %s", todo_id)
        return True

    def delete(self, todo_id: str) -> bool:
        with self._lock:
            removed = self._items.pop(todo_id, None) is not None
        if removed:
            logger.debug("Removed todo %s", todo_id)
        return removed

    def modify(self, todo_id: str, mutator: TodoMutator) -> Optional[TodoEntity]:
        with self._lock:
            existing = self._items.get(todo_id)
            if existing is None:
                return None
            updated = mutator(existing.copy())
            self._items[todo_id] = updated.copy()
        logger.debug("Modified todo %s", todo_id)
        return updated

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        """Remove every record. Useful for testing."""
        with self._lock:
            self._items.clear()
