"""CommandMetrics protocol for MongoDB command instrumentation.

Abstracts the command collector so the metrics facade depends on a protocol
rather than a concrete library.  Production uses Prometheus; tests inject a
fake that records finished-command durations in memory.
"""

from typing import Optional, Protocol, runtime_checkable

from pymongo import monitoring


@runtime_checkable
class CommandMetrics(Protocol):
    """Protocol for collecting metrics from pymongo command events."""

    @property
    def duration_ns(self) -> int:
        """Duration of the most recently finished command, in nanoseconds."""
        ...

    def observe(self, duration_micros: int) -> None:
        """Record a finished (succeeded or failed) command.

        Args:
            duration_micros: Elapsed time as reported by pymongo, in microseconds.
        """
        ...

    def hook(
        self,
        parent: Optional[monitoring.CommandListener] = None,
    ) -> monitoring.CommandListener:
        """Return a command listener that feeds this collector.

        Args:
            parent: Existing listener to call first on every event, or None.
        """
        ...
