"""PoolMetrics protocol for MongoDB connection pool instrumentation.

Abstracts the pool collector so the metrics facade depends on a protocol
rather than a concrete library.  Production uses Prometheus; tests inject a
fake that records every pool event kind in memory.
"""

from typing import Any, Optional, Protocol, runtime_checkable

from pymongo import monitoring


@runtime_checkable
class PoolMetrics(Protocol):
    """Protocol for collecting metrics from pymongo connection pool events."""

    def on_event(self, kind: str, event: Any) -> None:
        """Apply one pool event.

        Args:
            kind: Name of the ``ConnectionPoolListener`` entry point that fired,
                e.g. ``"connection_checked_out"``.
            event: The pymongo event object.  Only its optional ``options``
                mapping is read.
        """
        ...

    def hook(
        self,
        parent: Optional[monitoring.ConnectionPoolListener] = None,
    ) -> monitoring.ConnectionPoolListener:
        """Return a pool listener that feeds this collector.

        Args:
            parent: Existing listener to call first on every event, or None.
        """
        ...
