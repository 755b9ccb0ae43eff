"""Metric descriptor table shared by the Prometheus collectors.

Each collector keeps one ordered tuple of ``MetricDescriptor``.  Both
``describe()`` and ``collect()`` walk that same tuple, so a family can never
be announced without being emitted or emitted without being announced.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from prometheus_client.core import CounterMetricFamily, GaugeMetricFamily

MetricFamily = Union[CounterMetricFamily, GaugeMetricFamily]


class MetricKind(str, Enum):
    """Exposition semantics of a descriptor."""

    COUNTER = "counter"
    GAUGE = "gauge"


@dataclass(frozen=True)
class MetricDescriptor:
    """Immutable (name, kind, help) for one unlabelled metric family."""

    name: str
    kind: MetricKind
    help: str

    def family(self, value: Optional[float] = None) -> MetricFamily:
        """Build the family, with one sample when ``value`` is given."""
        if self.kind is MetricKind.COUNTER:
            return CounterMetricFamily(self.name, self.help, value=value)
        return GaugeMetricFamily(self.name, self.help, value=value)


def fq_name(namespace: str, name: str) -> str:
    """Join the namespace and a metric name: ``go_mongo`` + ``pool_created``."""
    return f"{namespace}_{name}"
