"""Prometheus implementation of the PoolMetrics protocol.

Eight counters track connection pool lifecycle events and three gauges
mirror the pool configuration last reported by the driver.  All eleven
values sit behind one reader/writer lock, so a scrape always sees them as
of a single instant.
"""

from typing import Any, Iterator, Mapping, Optional

from pymongo import monitoring

from prommongo.adapters.descriptors import (
    MetricDescriptor,
    MetricFamily,
    MetricKind,
    fq_name,
)
from prommongo.adapters.pool_metrics.listener import ChainedPoolListener
from prommongo.core.config import settings
from prommongo.core.logging import logger
from prommongo.core.protocols.pool_metrics import PoolMetrics
from prommongo.core.rwlock import RWLock

# (listener entry point, metric name, help), in exposition order.
_COUNTERS = (
    ("connection_closed", "connection_closed", "The total number of closed connection events."),
    ("pool_created", "pool_created", "The total number of pool created events."),
    ("connection_created", "connection_created", "The total number of connection created events."),
    (
        "connection_check_out_failed",
        "get_failed",
        "The total number of connection checkout failed events.",
    ),
    (
        "connection_checked_out",
        "get_succeeded",
        "The total number of connection checkedout events.",
    ),
    (
        "connection_checked_in",
        "connection_returnd",
        "The total number of connection checkedin events.",
    ),
    ("pool_cleared", "pool_cleared", "The total number of connection pool cleared events"),
    ("pool_closed", "pool_closed", "The total number of connection pool closed events"),
)

# (pool option key, metric name, help, driver default).  pymongo only reports
# options that differ from its defaults, so a missing key means the default.
_GAUGES = (
    (
        "maxPoolSize",
        "max_pool_size",
        "The maximum number of connections allowed in the driver's connection pool to each server.",
        100,
    ),
    (
        "minPoolSize",
        "min_pool_size",
        "The minimum number of connections allowed in the driver's connection pool to each server.",
        0,
    ),
    (
        "waitQueueTimeoutMS",
        "wait_queue_timeout_ms",
        "The maximum amount of time a thread can wait for a connection to become available.",
        0,
    ),
)

RECOGNIZED_KINDS = frozenset(kind for kind, _, _ in _COUNTERS)


def _pool_options(options: Mapping[str, Any]) -> dict[str, int]:
    """Map a pool options payload to gauge values.

    ``None`` (unbounded) reads as 0.  pymongo reports ``waitQueueTimeoutMS``
    as a float derived from seconds, so values are rounded to the nearest
    integer rather than truncated.
    """
    values = {}
    for key, name, _, default in _GAUGES:
        value = options.get(key, default)
        values[name] = round(value) if value is not None else 0
    return values


class PrometheusPoolMetrics(PoolMetrics):
    """Prometheus collector for connection pool events and configuration."""

    def __init__(self, namespace: Optional[str] = None) -> None:
        namespace = namespace or settings.METRICS_NAMESPACE

        self._kind_to_metric = {kind: name for kind, name, _ in _COUNTERS}
        self._descriptors: tuple[tuple[str, MetricDescriptor], ...] = tuple(
            (name, MetricDescriptor(fq_name(namespace, name), MetricKind.COUNTER, help_text))
            for _, name, help_text in _COUNTERS
        ) + tuple(
            (name, MetricDescriptor(fq_name(namespace, name), MetricKind.GAUGE, help_text))
            for _, name, help_text, _ in _GAUGES
        )

        self._lock = RWLock()
        self._values: dict[str, int] = {name: 0 for name, _ in self._descriptors}

    # -- prometheus_client collector interface --

    def describe(self) -> Iterator[MetricFamily]:
        for _, descriptor in self._descriptors:
            yield descriptor.family()

    def collect(self) -> Iterator[MetricFamily]:
        with self._lock.read():
            snapshot = dict(self._values)
        for name, descriptor in self._descriptors:
            yield descriptor.family(snapshot[name])

    # -- PoolMetrics protocol methods --

    def on_event(self, kind: str, event: Any) -> None:
        metric = self._kind_to_metric.get(kind)
        options = getattr(event, "options", None)
        gauges = _pool_options(options) if options is not None else None

        with self._lock.write():
            if metric is not None:
                self._values[metric] += 1
            if gauges is not None:
                self._values.update(gauges)

    def hook(
        self,
        parent: Optional[monitoring.ConnectionPoolListener] = None,
    ) -> monitoring.ConnectionPoolListener:
        logger.with_context(collector="pool", chained=parent is not None).debug(
            "Created pool listener"
        )
        return ChainedPoolListener(self, parent)

    def snapshot(self) -> dict[str, int]:
        """Current values keyed by unprefixed metric name."""
        with self._lock.read():
            return dict(self._values)
