"""Connection pool metrics adapters."""

from prommongo.adapters.pool_metrics.fake import FakePoolMetrics
from prommongo.adapters.pool_metrics.prometheus import PrometheusPoolMetrics

__all__ = ["PrometheusPoolMetrics", "FakePoolMetrics"]
