# backend/todo_api/__init__.py
from __future__ import annotations

"""
Marks `todo_api` as a Python package.

Routers live in todo_api/api, the store in todo_api/db, services in
todo_api/services.
"""
