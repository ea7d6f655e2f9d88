# backend/todo_api/schemas/__init__.py
from __future__ import annotations

"""
Pydantic schemas for request/response models.

This module is the API contract layer. It is used by:
- todo_api.api.todos (request parsing and response serialization)

Only the fields declared here reach the wire; anything else on the ORM
row stays internal.
"""

from pydantic import BaseModel


# ---------- Todo Schemas ----------


class TodoCreate(BaseModel):
    name: str


class TodoRead(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
