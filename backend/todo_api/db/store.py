from __future__ import annotations

"""backend/todo_api/db/store.py

Persistence boundary for Todo rows.

This module provides:

- StorageError: the single failure kind raised at the store boundary
- TodoStore: structural interface the service depends on
- SqlTodoStore: TodoStore over a SQLAlchemy Session

The two queries are written out directly; there is no generic repository.
Failures are logged here, once, before being re-raised as StorageError.
"""

import logging
from typing import Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from todo_api import models

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Connectivity or constraint failure while talking to the database."""


class TodoStore(Protocol):
    """Minimal interface that concrete stores must implement."""

    def insert(self, name: str) -> models.Todo:
        """Persist a new row and return it with its assigned id."""
        ...

    def list_all(self) -> Sequence[models.Todo]:
        """Return every row. Order is unspecified."""
        ...


class SqlTodoStore:
    def __init__(self, db: Session):
        self._db = db

    def insert(self, name: str) -> models.Todo:
        todo = models.Todo(name=name)
        try:
            self._db.add(todo)
            self._db.flush()
            todo_id = todo.id
            self._db.commit()
        except SQLAlchemyError as exc:
            self._db.rollback()
            logger.error("Failed to insert todo: %s", exc)
            raise StorageError("Failed to insert todo") from exc
        # Built from the flushed values; nothing is read back after commit
        return models.Todo(id=todo_id, name=name)

    def list_all(self) -> Sequence[models.Todo]:
        try:
            return self._db.scalars(select(models.Todo)).all()
        except SQLAlchemyError as exc:
            logger.error("Failed to list todos: %s", exc)
            raise StorageError("Failed to list todos") from exc
