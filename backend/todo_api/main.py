# backend/todo_api/main.py
from __future__ import annotations

"""
FastAPI application setup.

This module depends on:
- todo_api.config for settings and logging
- todo_api.db.session for the engine, session factory and init_db
- todo_api.services.statsig_client for analytics events
- todo_api.api.api_router for route registration

Run it with ``uvicorn todo_api.main:app`` or ``python -m todo_api``.
"""

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine

from todo_api.api import api_router
from todo_api.config import Settings, get_settings, setup_logging
from todo_api.db.session import create_db_engine, create_session_factory, init_db
from todo_api.db.store import StorageError
from todo_api.services.statsig_client import StatsigClient


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the app from ``settings``.

    The database is ``settings.database_url`` unless an ``engine`` is
    passed in, in which case that engine is used as-is.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version="0.1.0",
    )

    app.state.settings = settings
    app.state.engine = engine or create_db_engine(settings.database_url)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.analytics = StatsigClient.from_settings(settings)

    # ---- CORS ----

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(o).rstrip("/") for o in settings.allowed_origins],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---- Routes ----

    app.include_router(api_router, prefix="/api")

    # ---- Errors ----

    # The store has already logged the underlying database error
    @app.exception_handler(StorageError)
    def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Storage unavailable"},
        )

    @app.exception_handler(RequestValidationError)
    def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        # A body without a usable name is rejected rather than defaulted
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    # ---- Lifecycle ----

    @app.on_event("startup")
    def on_startup() -> None:
        """
        Initialize database schema on startup and seed an empty table.

        Schema changes beyond create_all are out of scope; there is no
        migration tooling.
        """
        init_db(app.state.engine, settings.seed_todos)

    @app.on_event("shutdown")
    def on_shutdown() -> None:
        app.state.analytics.shutdown()

    # ---- Healthcheck ----

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


app = create_app()
