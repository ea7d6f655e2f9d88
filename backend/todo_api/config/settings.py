from __future__ import annotations

"""backend/todo_api/config/settings.py

Application configuration using environment-driven settings.

This module centralizes:
- database connection URL
- CORS configuration
- logging level
- optional seed rows inserted into an empty table on startup
- analytics (Statsig) server secret
- bind address for the bundled uvicorn runner
"""
from functools import lru_cache
from typing import List

from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  app_name: str = "todo-api"
  environment: str = "development"

  # Database
  database_url: str = "sqlite:///./todos.db"

  # CORS
  allowed_origins: List[AnyHttpUrl] = [
      "http://localhost:3000",
      "http://127.0.0.1:3000",
      "http://localhost:5173",
      "http://127.0.0.1:5173",
  ]

  # Logging
  log_level: str = "INFO"

  # Names inserted on startup when the todos table is empty
  seed_todos: List[str] = []

  # Analytics; events are dropped when unset
  statsig_server_secret: str | None = None

  # uvicorn bind address (python -m todo_api)
  host: str = "127.0.0.1"
  port: int = 8000

  model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Return a cached Settings instance."""
  return Settings()
