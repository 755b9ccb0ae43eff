"""Metrics renderer adapters."""

from prommongo.adapters.metrics_renderer.fake import FakeMetricsRenderer
from prommongo.adapters.metrics_renderer.prometheus import PrometheusMetricsRenderer

__all__ = ["PrometheusMetricsRenderer", "FakeMetricsRenderer"]
