"""Prometheus implementation of the CommandMetrics protocol.

A custom collector rather than a ``Gauge``: the value lives in the collector
behind its own reader/writer lock and is turned into a sample only when the
registry scrapes.  Only the most recent finished command is kept.
"""

from typing import Iterator, Optional

from pymongo import monitoring

from prommongo.adapters.command_metrics.listener import ChainedCommandListener
from prommongo.adapters.descriptors import (
    MetricDescriptor,
    MetricFamily,
    MetricKind,
    fq_name,
)
from prommongo.core.config import settings
from prommongo.core.logging import logger
from prommongo.core.protocols.command_metrics import CommandMetrics
from prommongo.core.rwlock import RWLock


class PrometheusCommandMetrics(CommandMetrics):
    """Prometheus collector exposing the last command duration."""

    def __init__(self, namespace: Optional[str] = None) -> None:
        namespace = namespace or settings.METRICS_NAMESPACE
        self._descriptors = (
            MetricDescriptor(
                fq_name(namespace, "command_duration_ns"),
                MetricKind.GAUGE,
                "Elapsed time of command.",
            ),
        )
        self._lock = RWLock()
        self._duration_ns = 0

    # -- prometheus_client collector interface --

    def describe(self) -> Iterator[MetricFamily]:
        for descriptor in self._descriptors:
            yield descriptor.family()

    def collect(self) -> Iterator[MetricFamily]:
        with self._lock.read():
            values = (self._duration_ns,)
        for descriptor, value in zip(self._descriptors, values):
            yield descriptor.family(value)

    # -- CommandMetrics protocol methods --

    @property
    def duration_ns(self) -> int:
        with self._lock.read():
            return self._duration_ns

    def observe(self, duration_micros: int) -> None:
        duration_ns = int(duration_micros) * 1000
        with self._lock.write():
            self._duration_ns = duration_ns

    def hook(
        self,
        parent: Optional[monitoring.CommandListener] = None,
    ) -> monitoring.CommandListener:
        logger.with_context(collector="command", chained=parent is not None).debug(
            "Created command listener"
        )
        return ChainedCommandListener(self, parent)
