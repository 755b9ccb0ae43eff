"""MetricsService protocol for the prommongo facade.

Callers that wire a ``MongoClient`` depend on this protocol rather than the
concrete Prometheus-backed class.  Production uses
``PrometheusMetricsService``; tests inject ``FakeMetricsService``.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from prommongo.core.protocols.command_metrics import CommandMetrics
from prommongo.core.protocols.pool_metrics import PoolMetrics


@runtime_checkable
class MetricsService(Protocol):
    """Protocol for the metrics facade.

    ``command`` and ``pool`` are typed with their protocols so callers can
    read collector state without knowing the backend.
    """

    command: CommandMetrics
    pool: PoolMetrics

    def register(self) -> None:
        """Register both collectors with the backing registry."""
        ...

    def event_listeners(
        self,
        command_parent: Optional[Any] = None,
        pool_parent: Optional[Any] = None,
    ) -> list[Any]:
        """Listeners to pass as ``MongoClient(event_listeners=...)``."""
        ...
