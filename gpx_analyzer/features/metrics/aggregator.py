"""
Metrics Aggregator

Reduces an ordered list of track points to training metrics in a
single forward pass over consecutive point pairs.

Never raises: missing timestamps, missing sensors, zero distance or
zero duration all resolve to 0 instead of NaN or an error. Rounding
happens once, on the final values, never on running totals.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional, Sequence

from gpx_analyzer.config import settings
from gpx_analyzer.features.gpx.schemas import TrackPoint
from gpx_analyzer.features.metrics.schemas import MetricsResult
from gpx_analyzer.shared.geo import haversine, speed_kmh
from gpx_analyzer.shared.rounding import round_half_away, truncate
from gpx_analyzer.shared.timestamps import utc_now

logger = logging.getLogger(__name__)


@dataclass
class _RunningTotals:
    """Accumulators for the forward pass (unrounded)."""
    distance_km: float = 0.0
    elev_gain_m: float = 0.0
    elev_loss_m: float = 0.0
    max_elev_m: float = 0.0
    min_elev_m: float = 0.0
    max_speed_kmh: float = 0.0
    hr_sum: int = 0
    hr_count: int = 0
    max_hr: int = 0
    cadence_sum: int = 0
    cadence_count: int = 0


class MetricsAggregator:
    """
    Computes MetricsResult for a parsed track.

    Example usage:
        aggregator = MetricsAggregator()
        result = aggregator.compute(parsed.points)
        print(f"{result.distance_km} km in {result.duration_sec} s")

        # Deterministic fallback date in tests
        aggregator = MetricsAggregator(clock=lambda: fixed_now)
    """

    def __init__(
        self,
        max_speed_kmh: Optional[float] = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Args:
            max_speed_kmh: Segment speeds at or above this are treated as
                GPS noise and ignored for max speed (default from settings)
            clock: Source of "now" for tracks without a start timestamp
        """
        self.max_speed_kmh = (
            max_speed_kmh if max_speed_kmh is not None else settings.max_speed_kmh
        )
        self.clock = clock

    def compute(self, points: Sequence[TrackPoint]) -> MetricsResult:
        """
        Compute metrics for an ordered list of points.

        Args:
            points: Track points in recording order

        Returns:
            MetricsResult with all values rounded to 2 decimals
        """
        if not points:
            return MetricsResult(activity_date=self.clock())

        totals = _RunningTotals(
            max_elev_m=points[0].ele,
            min_elev_m=points[0].ele,
        )

        for i in range(1, len(points)):
            self._accumulate(totals, points[i - 1], points[i])

        first, last = points[0], points[-1]

        duration_sec = 0
        if first.time is not None and last.time is not None:
            elapsed = (last.time - first.time).total_seconds()
            if elapsed > 0:
                duration_sec = int(elapsed)

        avg_speed = 0.0
        pace = 0.0
        if duration_sec > 0 and totals.distance_km > 0:
            avg_speed = speed_kmh(totals.distance_km, duration_sec)
            pace = (duration_sec / 60.0) / totals.distance_km

        avg_hr = totals.hr_sum / totals.hr_count if totals.hr_count > 0 else 0.0
        avg_cadence = (
            totals.cadence_sum / totals.cadence_count
            if totals.cadence_count > 0 else 0.0
        )

        activity_date = first.time if first.time is not None else self.clock()

        result = MetricsResult(
            distance_km=round_half_away(totals.distance_km),
            duration_sec=duration_sec,
            avg_speed_kmh=round_half_away(avg_speed),
            max_speed_kmh=self._publish_max_speed(totals.max_speed_kmh),
            pace_min_per_km=round_half_away(pace),
            elev_gain_m=round_half_away(totals.elev_gain_m),
            elev_loss_m=round_half_away(totals.elev_loss_m),
            max_elev_m=round_half_away(totals.max_elev_m),
            min_elev_m=round_half_away(totals.min_elev_m),
            avg_hr=round_half_away(avg_hr),
            max_hr=totals.max_hr,
            avg_cadence=round_half_away(avg_cadence),
            activity_date=activity_date,
        )

        logger.debug(
            f"Computed metrics for {len(points)} points: "
            f"{result.distance_km} km, {result.duration_sec} s, "
            f"+{result.elev_gain_m}/-{result.elev_loss_m} m"
        )
        return result

    def _accumulate(
        self,
        totals: _RunningTotals,
        prev: TrackPoint,
        curr: TrackPoint,
    ) -> None:
        """Add the segment prev -> curr to the running totals."""
        segment_km = haversine(prev.lat, prev.lon, curr.lat, curr.lon)
        totals.distance_km += segment_km

        ele_diff = curr.ele - prev.ele
        if ele_diff > 0:
            totals.elev_gain_m += ele_diff
        else:
            totals.elev_loss_m += abs(ele_diff)

        totals.max_elev_m = max(totals.max_elev_m, curr.ele)
        totals.min_elev_m = min(totals.min_elev_m, curr.ele)

        if prev.time is not None and curr.time is not None:
            delta_sec = (curr.time - prev.time).total_seconds()
            if delta_sec > 0:
                kmh = speed_kmh(segment_km, delta_sec)
                if totals.max_speed_kmh < kmh < self.max_speed_kmh:
                    totals.max_speed_kmh = kmh

        # Sensor readings count from the second point on
        if curr.hr is not None:
            totals.hr_sum += curr.hr
            totals.hr_count += 1
            totals.max_hr = max(totals.max_hr, curr.hr)

        if curr.cadence is not None:
            totals.cadence_sum += curr.cadence
            totals.cadence_count += 1

    def _publish_max_speed(self, max_speed: float) -> float:
        """Round max speed without letting it reach the noise threshold."""
        rounded = round_half_away(max_speed)
        if rounded >= self.max_speed_kmh:
            return truncate(max_speed)
        return rounded


def compute_metrics(points: Sequence[TrackPoint]) -> MetricsResult:
    """Compute metrics with the default aggregator settings."""
    return MetricsAggregator().compute(points)
