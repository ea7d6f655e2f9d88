# backend/todo_api/db/session.py
from __future__ import annotations

"""
Database session and Base ORM declarations.

This module is imported by:
- todo_api.models (for Base)
- todo_api.main (builds the engine and session factory per app)
- any route needing a DB session (via get_db)

The engine and session factory live on ``app.state`` so that each app
talks to the database named by the Settings it was created with.
"""

import logging
from typing import Iterable

from fastapi import Request
from sqlalchemy import create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

# Base class for all ORM models
Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Build an engine for ``database_url``.

    SQLite connections are handed across the server's worker threads, so
    the same-thread check is disabled. In-memory SQLite databases live
    only as long as their connection, so every session shares one.
    """
    kwargs: dict = {"future": True}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in database_url:
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory used for request-scoped sessions."""
    return sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        future=True,
    )


def get_db(request: Request):
    """
    FastAPI dependency that yields a DB session and ensures it is closed.

    Example usage in a route:
        from todo_api.db.session import get_db
        def endpoint(db: Session = Depends(get_db)): ...
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine, seed_names: Iterable[str] = ()) -> int:
    """
    Create the schema and insert seed rows into an empty todos table.

    Returns the number of seeded rows. A table that already holds rows is
    left untouched, so restarting the service never duplicates seeds.
    """
    # Registers the mapped tables on Base.metadata
    from todo_api import models

    Base.metadata.create_all(bind=bind)

    names = list(seed_names)
    if not names:
        return 0

    with Session(bind) as db:
        existing = db.scalar(select(func.count()).select_from(models.Todo))
        if existing:
            logger.info("Skipping seed: todos table already has %d rows", existing)
            return 0
        db.add_all(models.Todo(name=name) for name in names)
        db.commit()

    logger.info("Seeded %d todos", len(names))
    return len(names)
