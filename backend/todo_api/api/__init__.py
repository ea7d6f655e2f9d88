# backend/todo_api/api/__init__.py
from __future__ import annotations

"""
API router aggregation.

This module exposes a single `api_router` that the FastAPI app
can include with a prefix such as `/api`.
"""

from fastapi import APIRouter

from . import todos

api_router = APIRouter()
api_router.include_router(todos.router)
