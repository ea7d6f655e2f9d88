# backend/todo_api/config/__init__.py
from __future__ import annotations

"""
Shortcut imports for configuration.
"""

from .logging_config import setup_logging  # noqa: F401
from .settings import Settings, get_settings  # noqa: F401
