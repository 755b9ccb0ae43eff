"""Fake metrics service for testing."""

from __future__ import annotations

from typing import Any, Optional


class FakeMetricsService:
    """In-memory MetricsService stand-in for testing.

    Structurally satisfies the ``MetricsService`` protocol; pair it with
    ``FakeCommandMetrics`` and ``FakePoolMetrics``.
    """

    def __init__(self, command: Any, pool: Any) -> None:
        self.command = command
        self.pool = pool
        self.register_calls: int = 0

    def register(self) -> None:
        self.register_calls += 1

    def event_listeners(
        self,
        command_parent: Optional[Any] = None,
        pool_parent: Optional[Any] = None,
    ) -> list[Any]:
        return [self.command.hook(command_parent), self.pool.hook(pool_parent)]
