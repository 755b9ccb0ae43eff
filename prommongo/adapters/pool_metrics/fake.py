"""Fake PoolMetrics for testing.

Records every pool event kind in arrival order so tests can assert on pool
instrumentation without reaching into prometheus-client internals.
"""

from dataclasses import dataclass
from typing import Any, Optional

from pymongo import monitoring

from prommongo.adapters.pool_metrics.listener import ChainedPoolListener
from prommongo.core.protocols.pool_metrics import PoolMetrics


@dataclass
class PoolEventRecord:
    """Single observed pool event."""

    kind: str
    options: Optional[dict[str, Any]]


class FakePoolMetrics(PoolMetrics):
    """In-memory spy implementing the PoolMetrics protocol.

    Usage:
        fake = FakePoolMetrics()
        fake.hook().connection_checked_out(event)
        assert fake.kinds == ["connection_checked_out"]
    """

    def __init__(self) -> None:
        self.events: list[PoolEventRecord] = []
        self.hook_calls: int = 0

    def on_event(self, kind: str, event: Any) -> None:
        options = getattr(event, "options", None)
        self.events.append(PoolEventRecord(kind, dict(options) if options is not None else None))

    def hook(
        self,
        parent: Optional[monitoring.ConnectionPoolListener] = None,
    ) -> monitoring.ConnectionPoolListener:
        self.hook_calls += 1
        return ChainedPoolListener(self, parent)

    # -- test helpers --

    @property
    def kinds(self) -> list[str]:
        return [record.kind for record in self.events]

    def count(self, kind: str) -> int:
        return sum(1 for record in self.events if record.kind == kind)

    def clear(self) -> None:
        """Reset all recorded state."""
        self.events.clear()
        self.hook_calls = 0
