"""Chaining pymongo command listener.

``succeeded`` and ``failed`` call the parent first, then pass the event's
``duration_micros`` to ``CommandMetrics.observe``.  ``started`` exists only
so a parent listener still sees command starts.
"""

from typing import Optional

from pymongo import monitoring

from prommongo.core.protocols.command_metrics import CommandMetrics


class ChainedCommandListener(monitoring.CommandListener):
    """Command listener that calls ``parent`` first, then feeds ``metrics``."""

    def __init__(
        self,
        metrics: CommandMetrics,
        parent: Optional[monitoring.CommandListener] = None,
    ) -> None:
        self._metrics = metrics
        self._parent = parent

    @property
    def parent(self) -> Optional[monitoring.CommandListener]:
        return self._parent

    def started(self, event: monitoring.CommandStartedEvent) -> None:
        if self._parent is not None:
            self._parent.started(event)

    def succeeded(self, event: monitoring.CommandSucceededEvent) -> None:
        if self._parent is not None:
            self._parent.succeeded(event)
        self._metrics.observe(event.duration_micros)

    def failed(self, event: monitoring.CommandFailedEvent) -> None:
        if self._parent is not None:
            self._parent.failed(event)
        self._metrics.observe(event.duration_micros)
