# backend/todo_api/models/__init__.py
from __future__ import annotations

"""
Core ORM models for the todo backend.

This module depends on:
- todo_api.db.session.Base for the declarative base

It is used by:
- todo_api.db.store (the only code that reads or writes rows)
- todo_api.schemas (TodoRead is built from these attributes)

Models:
- Todo: a single (id, name) row
"""

from sqlalchemy import Column, Integer, String

from todo_api.db.session import Base


class Todo(Base):
    __tablename__ = "todos"
    # AUTOINCREMENT keeps SQLite from handing out the id of a vanished row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)

    def __repr__(self) -> str:
        return f"Todo(id={self.id!r}, name={self.name!r})"
