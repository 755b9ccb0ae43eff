"""Fake CommandMetrics for testing.

Records every observed duration so tests can assert on command
instrumentation without reaching into prometheus-client internals.
"""

from typing import Optional

from pymongo import monitoring

from prommongo.adapters.command_metrics.listener import ChainedCommandListener
from prommongo.core.protocols.command_metrics import CommandMetrics


class FakeCommandMetrics(CommandMetrics):
    """In-memory spy implementing the CommandMetrics protocol.

    Usage:
        fake = FakeCommandMetrics()
        fake.hook().succeeded(event)
        assert fake.duration_ns == event.duration_micros * 1000
    """

    def __init__(self) -> None:
        self.durations_ns: list[int] = []
        self.hook_calls: int = 0

    @property
    def duration_ns(self) -> int:
        return self.durations_ns[-1] if self.durations_ns else 0

    def observe(self, duration_micros: int) -> None:
        self.durations_ns.append(int(duration_micros) * 1000)

    def hook(
        self,
        parent: Optional[monitoring.CommandListener] = None,
    ) -> monitoring.CommandListener:
        self.hook_calls += 1
        return ChainedCommandListener(self, parent)

    # -- test helpers --

    def clear(self) -> None:
        """Reset all recorded state."""
        self.durations_ns.clear()
        self.hook_calls = 0
