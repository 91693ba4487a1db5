"""
Activity Import Service

Runs an uploaded file through the whole pipeline:
- GPX parsing (rejects unusable files)
- Sport type normalization
- Metrics aggregation

This is the main entry point for the upload endpoint.
"""

import logging
from typing import Optional

from gpx_analyzer.config import settings
from gpx_analyzer.features.activity.schemas import ActivityImport
from gpx_analyzer.features.gpx import GPXParserService
from gpx_analyzer.features.metrics import MetricsAggregator

logger = logging.getLogger(__name__)


def normalize_sport_type(sport_type: Optional[str]) -> str:
    """Trim the uploader's sport label; blank means the configured default."""
    if sport_type is None:
        return settings.default_sport_type
    return sport_type.strip() or settings.default_sport_type


class ActivityImportService:
    """
    Orchestrates parsing and metrics for one upload.

    Example usage:
        service = ActivityImportService()
        try:
            activity = service.analyze(content, sport_type="Ride")
        except MalformedGPXError as e:
            ...  # reject the whole upload, store nothing
        payload = activity.to_dict()
    """

    def __init__(self, aggregator: Optional[MetricsAggregator] = None):
        self.aggregator = aggregator or MetricsAggregator()

    def analyze(
        self,
        content: bytes,
        sport_type: Optional[str] = None,
        file_name: Optional[str] = None,
    ) -> ActivityImport:
        """
        Parse an uploaded GPX file and compute its metrics.

        Args:
            content: Raw file bytes
            sport_type: Sport label sent with the upload
            file_name: Uploaded file name, kept for display

        Returns:
            ActivityImport ready for storage

        Raises:
            MalformedGPXError: If the file is not a usable GPX track
        """
        parsed = GPXParserService.parse(content)
        metrics = self.aggregator.compute(parsed.points)
        sport = normalize_sport_type(sport_type)

        logger.info(
            f"Analyzed upload '{parsed.name}' ({sport}): "
            f"{len(parsed.points)} points, {metrics.distance_km} km"
        )

        return ActivityImport(
            file_name=file_name,
            sport_type=sport,
            name=parsed.name,
            activity_date=metrics.activity_date,
            metrics=metrics,
            points=parsed.points,
        )
