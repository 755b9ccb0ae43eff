"""Chaining pymongo pool listener.

Every ``ConnectionPoolListener`` entry point funnels into ``PoolMetrics.on_event`` with
the entry point's name as the event kind.  The parent listener, if any, is
called first and its exceptions propagate unchanged.
"""

from typing import Any, Optional

from pymongo import monitoring

from prommongo.core.protocols.pool_metrics import PoolMetrics

# Every ConnectionPoolListener entry point, recognized by the collectors or not.
POOL_LISTENER_METHODS = (
    "pool_created",
    "pool_ready",
    "pool_cleared",
    "pool_closed",
    "connection_created",
    "connection_ready",
    "connection_closed",
    "connection_check_out_started",
    "connection_check_out_failed",
    "connection_checked_out",
    "connection_checked_in",
)


class ChainedPoolListener(monitoring.ConnectionPoolListener):
    """Pool listener that calls ``parent`` first, then feeds ``metrics``."""

    def __init__(
        self,
        metrics: PoolMetrics,
        parent: Optional[monitoring.ConnectionPoolListener] = None,
    ) -> None:
        self._metrics = metrics
        self._parent = parent

    @property
    def parent(self) -> Optional[monitoring.ConnectionPoolListener]:
        return self._parent

    def _dispatch(self, kind: str, event: Any) -> None:
        if self._parent is not None:
            getattr(self._parent, kind)(event)
        self._metrics.on_event(kind, event)

    def pool_created(self, event: monitoring.PoolCreatedEvent) -> None:
        self._dispatch("pool_created", event)

    def pool_ready(self, event: monitoring.PoolReadyEvent) -> None:
        self._dispatch("pool_ready", event)

    def pool_cleared(self, event: monitoring.PoolClearedEvent) -> None:
        self._dispatch("pool_cleared", event)

    def pool_closed(self, event: monitoring.PoolClosedEvent) -> None:
        self._dispatch("pool_closed", event)

    def connection_created(self, event: monitoring.ConnectionCreatedEvent) -> None:
        self._dispatch("connection_created", event)

    def connection_ready(self, event: monitoring.ConnectionReadyEvent) -> None:
        self._dispatch("connection_ready", event)

    def connection_closed(self, event: monitoring.ConnectionClosedEvent) -> None:
        self._dispatch("connection_closed", event)

    def connection_check_out_started(
        self, event: monitoring.ConnectionCheckOutStartedEvent
    ) -> None:
        self._dispatch("connection_check_out_started", event)

    def connection_check_out_failed(
        self, event: monitoring.ConnectionCheckOutFailedEvent
    ) -> None:
        self._dispatch("connection_check_out_failed", event)

    def connection_checked_out(self, event: monitoring.ConnectionCheckedOutEvent) -> None:
        self._dispatch("connection_checked_out", event)

    def connection_checked_in(self, event: monitoring.ConnectionCheckedInEvent) -> None:
        self._dispatch("connection_checked_in", event)
