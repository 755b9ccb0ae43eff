"""Command metrics adapters."""

from prommongo.adapters.command_metrics.fake import FakeCommandMetrics
from prommongo.adapters.command_metrics.prometheus import PrometheusCommandMetrics

__all__ = ["PrometheusCommandMetrics", "FakeCommandMetrics"]
