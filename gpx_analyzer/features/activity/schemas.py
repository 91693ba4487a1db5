"""
Activity import schemas.

The bundle handed to the persistence layer after an upload is analyzed.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from gpx_analyzer.features.gpx.schemas import TrackPoint
from gpx_analyzer.features.metrics.schemas import MetricsResult


class ActivityImport(BaseModel):
    """Parsed track plus metrics for one uploaded file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_name: Optional[str] = Field(default=None, alias="fileName")
    sport_type: str = Field(..., alias="sportType")
    name: str
    activity_date: datetime = Field(..., alias="activityDate")
    metrics: MetricsResult
    points: List[TrackPoint]

    def to_dict(self) -> dict:
        """
        Convert to dict for API response / storage.

        Unset optional values (file name, point time/hr/cadence) are
        left out instead of being written as null.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
