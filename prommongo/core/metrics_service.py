"""Prometheus-backed MetricsService implementation.

Composes the command collector, the pool collector and the renderer behind
a single API so callers wiring a ``MongoClient`` only deal with one object:

    metrics = create_metrics_service()
    metrics.register()
    client = MongoClient(uri, event_listeners=metrics.event_listeners())
"""

from __future__ import annotations

from typing import Any, Optional

from prometheus_client import CollectorRegistry
from pymongo import monitoring

from prommongo.core.exceptions import MetricsRegistrationError
from prommongo.core.logging import logger
from prommongo.core.protocols.command_metrics import CommandMetrics
from prommongo.core.protocols.metrics_renderer import MetricsRenderer
from prommongo.core.protocols.pool_metrics import PoolMetrics


class PrometheusMetricsService:
    """Prometheus-backed facade that owns both collectors and their registry.

    Satisfies the ``MetricsService`` protocol structurally.

    ``_renderer`` and ``_registry`` are private: callers read collector
    state through ``command`` and ``pool`` and serve metrics through
    ``generate()``.
    """

    command: CommandMetrics
    pool: PoolMetrics

    def __init__(
        self,
        command: CommandMetrics,
        pool: PoolMetrics,
        renderer: MetricsRenderer,
        registry: CollectorRegistry,
    ) -> None:
        self.command = command
        self.pool = pool
        self._renderer = renderer
        self._registry = registry
        self._registered: list[Any] = []
        self._logger = logger.with_context(component="metrics_service")

    def register(self) -> None:
        """Register both collectors; calling it again is a no-op.

        Raises:
            MetricsRegistrationError: a family name is already taken in the
                registry.  Collectors registered before the failure are
                unregistered again.
        """
        if self._registered:
            return
        for collector in (self.command, self.pool):
            try:
                self._registry.register(collector)
            except ValueError as e:
                self.unregister()
                raise MetricsRegistrationError(type(collector).__name__, str(e)) from e
            self._registered.append(collector)
        self._logger.with_context(families=len(self.family_names())).info(
            f"Registered {len(self._registered)} MongoDB collectors"
        )

    def unregister(self) -> None:
        """Remove registered collectors (reverse registration order)."""
        while self._registered:
            self._registry.unregister(self._registered.pop())

    def event_listeners(
        self,
        command_parent: Optional[monitoring.CommandListener] = None,
        pool_parent: Optional[monitoring.ConnectionPoolListener] = None,
    ) -> list[Any]:
        """Listeners to pass as ``MongoClient(event_listeners=...)``.

        Args:
            command_parent: Existing command listener to keep calling first.
            pool_parent: Existing pool listener to keep calling first.
        """
        return [self.command.hook(command_parent), self.pool.hook(pool_parent)]

    @property
    def content_type(self) -> str:
        return self._renderer.content_type

    def generate(self) -> bytes:
        return self._renderer.generate()

    def family_names(self) -> list[str]:
        return self._renderer.family_names()


def create_metrics_service(
    registry: Optional[CollectorRegistry] = None,
    namespace: Optional[str] = None,
    openmetrics: bool = False,
) -> PrometheusMetricsService:
    """Build a service with Prometheus collectors on ``registry``.

    A fresh registry is created when none is given, keeping these metrics
    out of the default global registry.  ``openmetrics`` selects the
    OpenMetrics exposition format for ``generate()``.
    """
    from prommongo.adapters.command_metrics import PrometheusCommandMetrics
    from prommongo.adapters.metrics_renderer import PrometheusMetricsRenderer
    from prommongo.adapters.pool_metrics import PrometheusPoolMetrics

    registry = registry or CollectorRegistry()
    return PrometheusMetricsService(
        command=PrometheusCommandMetrics(namespace),
        pool=PrometheusPoolMetrics(namespace),
        renderer=PrometheusMetricsRenderer(registry, openmetrics),
        registry=registry,
    )
