"""
GPX-related schemas.

Pydantic models for parsed tracks. Optional point fields serialize as
absent (exclude_none) so "no reading" stays distinct from a zero reading.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gpx_analyzer.shared.constants import DEFAULT_TRACK_NAME
from gpx_analyzer.shared.timestamps import to_utc


class TrackPoint(BaseModel):
    """Single GPS fix with optional sensor readings."""

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    ele: float = 0.0  # 0.0 when the source has no <ele>
    time: Optional[datetime] = None  # UTC
    hr: Optional[int] = Field(default=None, ge=0)
    cadence: Optional[int] = Field(default=None, ge=0)

    @field_validator('time')
    @classmethod
    def normalize_time(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Keep every instant aware UTC so points can be subtracted."""
        return to_utc(v)

    def to_dict(self) -> dict:
        """Convert to JSON-ready dict, omitting unset readings."""
        return self.model_dump(mode="json", exclude_none=True)


class ParsedTrack(BaseModel):
    """Name and ordered points of the first track in a GPX file."""

    model_config = ConfigDict(frozen=True)

    name: str = DEFAULT_TRACK_NAME
    points: List[TrackPoint]

    def to_dict(self) -> dict:
        """Convert to JSON-ready dict."""
        return self.model_dump(mode="json", exclude_none=True)
