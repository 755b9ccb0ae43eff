"""In-memory fakes for core services."""

from prommongo.core.fakes.metrics_service import FakeMetricsService

__all__ = ["FakeMetricsService"]
