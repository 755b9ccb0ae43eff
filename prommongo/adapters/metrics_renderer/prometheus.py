"""Prometheus implementation of the MetricsRenderer protocol.

Renders the CollectorRegistry that holds the command and pool collectors.
The classic text format is the default; ``openmetrics=True`` switches to
OpenMetrics, where counter families keep their bare name and samples carry
the ``_total`` suffix.
"""

from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from prometheus_client.openmetrics import exposition as openmetrics_exposition

from prommongo.core.protocols.metrics_renderer import MetricsRenderer


class PrometheusMetricsRenderer(MetricsRenderer):
    """Render the MongoDB collectors of one CollectorRegistry."""

    def __init__(self, registry: CollectorRegistry, openmetrics: bool = False) -> None:
        self._registry = registry
        self._openmetrics = openmetrics

    @property
    def content_type(self) -> str:
        if self._openmetrics:
            return openmetrics_exposition.CONTENT_TYPE_LATEST
        return CONTENT_TYPE_LATEST

    def generate(self) -> bytes:
        if self._openmetrics:
            return openmetrics_exposition.generate_latest(self._registry)
        return generate_latest(self._registry)

    def family_names(self) -> list[str]:
        return sorted(family.name for family in self._registry.collect())
