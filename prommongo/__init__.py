"""Prometheus collectors for pymongo command and connection pool events."""

from prommongo.adapters.command_metrics import PrometheusCommandMetrics
from prommongo.adapters.pool_metrics import PrometheusPoolMetrics
from prommongo.core.exceptions import MetricsRegistrationError
from prommongo.core.metrics_service import PrometheusMetricsService, create_metrics_service

__all__ = [
    "MetricsRegistrationError",
    "PrometheusCommandMetrics",
    "PrometheusMetricsService",
    "PrometheusPoolMetrics",
    "create_metrics_service",
]
