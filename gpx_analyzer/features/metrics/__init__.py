"""
Training metrics module.

Usage:
    from gpx_analyzer.features.metrics import MetricsAggregator, MetricsResult

Components:
- MetricsAggregator: Distance, duration, speed, pace, elevation, HR, cadence
- compute_metrics: Shortcut using default settings
- MetricsResult: Pydantic schema for computed metrics
"""

from .aggregator import MetricsAggregator, compute_metrics
from .schemas import MetricsResult

__all__ = [
    # Services
    "MetricsAggregator",
    "compute_metrics",
    # Schemas
    "MetricsResult",
]
