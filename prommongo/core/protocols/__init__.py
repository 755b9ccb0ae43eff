"""Core protocols.

Collectors, the renderer and the facade are all consumed through these
protocols so tests can swap in the in-memory fakes.
"""

from prommongo.core.protocols.command_metrics import CommandMetrics
from prommongo.core.protocols.metrics_renderer import MetricsRenderer
from prommongo.core.protocols.metrics_service import MetricsService
from prommongo.core.protocols.pool_metrics import PoolMetrics

__all__ = [
    "CommandMetrics",
    "MetricsRenderer",
    "MetricsService",
    "PoolMetrics",
]
