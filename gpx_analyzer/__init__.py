"""
GPX Training Analyzer

Turns an uploaded GPX file into track points and training metrics.

Usage:
    from gpx_analyzer import ActivityImportService, MalformedGPXError

    activity = ActivityImportService().analyze(content, sport_type="Run")
"""

from gpx_analyzer.features.activity import ActivityImport, ActivityImportService
from gpx_analyzer.features.gpx import (
    GPXParserService,
    MalformedGPXError,
    ParsedTrack,
    TrackPoint,
)
from gpx_analyzer.features.metrics import (
    MetricsAggregator,
    MetricsResult,
    compute_metrics,
)

__version__ = "0.1.0"

__all__ = [
    "ActivityImport",
    "ActivityImportService",
    "GPXParserService",
    "MalformedGPXError",
    "ParsedTrack",
    "TrackPoint",
    "MetricsAggregator",
    "MetricsResult",
    "compute_metrics",
]
