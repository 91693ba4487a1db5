"""
Training metrics schemas.

Every field is concrete: missing data resolves to 0, never None.
JSON keys are camelCase for the web client.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MetricsResult(BaseModel):
    """Metrics derived from one track."""

    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        populate_by_name=True,
    )

    distance_km: float = Field(default=0.0, ge=0, alias="distanceKm")
    duration_sec: int = Field(default=0, ge=0, alias="durationSec")
    avg_speed_kmh: float = Field(default=0.0, ge=0, alias="avgSpeedKmh")
    max_speed_kmh: float = Field(default=0.0, ge=0, alias="maxSpeedKmh")
    pace_min_per_km: float = Field(default=0.0, ge=0, alias="paceMinPerKm")
    elev_gain_m: float = Field(default=0.0, ge=0, alias="elevGainM")
    elev_loss_m: float = Field(default=0.0, ge=0, alias="elevLossM")
    max_elev_m: float = Field(default=0.0, alias="maxElevM")
    min_elev_m: float = Field(default=0.0, alias="minElevM")
    avg_hr: float = Field(default=0.0, ge=0, alias="avgHr")
    max_hr: int = Field(default=0, ge=0, alias="maxHr")
    avg_cadence: float = Field(default=0.0, ge=0, alias="avgCadence")
    activity_date: datetime = Field(..., alias="activityDate")

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return self.model_dump(mode="json", by_alias=True)
