from __future__ import annotations

"""backend/todo_api/services/todos.py

Business operations on todos.

TodoService sits between the HTTP layer and a TodoStore. It performs no
validation and no retries: whatever the store raises reaches the caller
unchanged.
"""

import logging
from typing import Any, Protocol

from todo_api import models
from todo_api.db.store import TodoStore

logger = logging.getLogger(__name__)


class EventSink(Protocol):
    def log_event(
        self,
        event_name: str,
        *,
        value: float | int | str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        ...


class TodoService:
    def __init__(self, store: TodoStore, analytics: EventSink | None = None):
        self._store = store
        self._analytics = analytics

    def find_all(self) -> list[models.Todo]:
        """Return every todo, in the order the store yields them."""
        return list(self._store.list_all())

    def create(self, name: str) -> models.Todo:
        """Persist a todo named ``name`` and return it with its new id."""
        todo = self._store.insert(name)
        logger.info("Created todo %s", todo.id)
        if self._analytics is not None:
            self._analytics.log_event("todo_created", metadata={"todo_id": str(todo.id)})
        return todo
