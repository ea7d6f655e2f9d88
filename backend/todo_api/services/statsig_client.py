"""Statsig client for backend analytics events.

One StatsigClient is built per app from its Settings and kept on
``app.state.analytics``. Without a server secret the client is disabled
and every call is a no-op. Analytics failures are logged and dropped;
they never fail a request.
"""
from __future__ import annotations

import logging
from typing import Any

from statsig.statsig_event import StatsigEvent
from statsig.statsig_options import StatsigOptions
from statsig.statsig_server import StatsigServer
from statsig.statsig_user import StatsigUser

from todo_api.config import Settings

logger = logging.getLogger(__name__)


class StatsigClient:
    def __init__(
        self,
        secret_key: str | None,
        environment: str,
        *,
        user_id: str = "todo-api",
    ):
        self._server: StatsigServer | None = None
        self._user = StatsigUser(user_id)
        if not secret_key:
            return

        try:
            server = StatsigServer()
            server.initialize(
                secret_key,
                options=StatsigOptions(environment={"tier": environment}),
            )
            self._server = server
        except Exception as exc:  # noqa: BLE001
            logger.warning("Statsig initialization failed: %s", exc)

    @classmethod
    def from_settings(cls, settings: Settings) -> "StatsigClient":
        return cls(settings.statsig_server_secret, settings.environment)

    @property
    def enabled(self) -> bool:
        return self._server is not None

    def log_event(
        self,
        event_name: str,
        *,
        value: float | int | str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if not self._server:
            return

        event = StatsigEvent(self._user, event_name, value=value, metadata=metadata)
        try:
            self._server.log_event(event)
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig event %s failed: %s", event_name, exc)

    def shutdown(self) -> None:
        if not self._server:
            return

        try:
            self._server.shutdown()
        except Exception as exc:  # noqa: BLE001
            logger.debug("Statsig shutdown failed: %s", exc)
