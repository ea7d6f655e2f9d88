"""Shared test fixtures and factories."""

from collections.abc import Iterator
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from todo_api import models
from todo_api.config import Settings
from todo_api.db.session import create_db_engine, create_session_factory, init_db
from todo_api.main import create_app

# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore the developer's .env and disable analytics."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        seed_todos=[],
        statsig_server_secret=None,
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def engine() -> Iterator[Engine]:
    """Fresh in-memory SQLite database with the schema created."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return create_session_factory(engine)


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


# =============================================================================
# Analytics Fixtures
# =============================================================================


class RecordingAnalytics:
    """Event sink that keeps every event instead of sending it."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def log_event(self, event_name: str, *, value=None, metadata=None) -> None:
        self.events.append((event_name, metadata or {}))

    def shutdown(self) -> None:
        pass


@pytest.fixture
def analytics() -> RecordingAnalytics:
    return RecordingAnalytics()


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(settings: Settings, engine: Engine, analytics: RecordingAnalytics) -> FastAPI:
    """Application whose request sessions talk to the test database."""
    app = create_app(settings, engine=engine)
    app.state.analytics = analytics
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


# =============================================================================
# Fake Store
# =============================================================================


class InMemoryTodoStore:
    """TodoStore kept in a dict, for service tests that skip the database."""

    def __init__(self) -> None:
        self._todos: dict[int, models.Todo] = {}
        self._ids = count(1)

    def insert(self, name: str) -> models.Todo:
        todo = models.Todo(id=next(self._ids), name=name)
        self._todos[todo.id] = todo
        return todo

    def list_all(self) -> list[models.Todo]:
        return list(self._todos.values())


@pytest.fixture
def memory_store() -> InMemoryTodoStore:
    return InMemoryTodoStore()
