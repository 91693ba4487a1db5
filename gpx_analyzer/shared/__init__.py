"""
Shared utilities (NOT business logic).

Usage:
    from gpx_analyzer.shared import haversine, round_half_away
    from gpx_analyzer.shared.constants import DEFAULT_TRACK_NAME
"""
from .geo import (
    haversine,
    speed_kmh,
    EARTH_RADIUS_KM,
)
from .rounding import (
    round_half_away,
    truncate,
    METRIC_DECIMALS,
)
from .timestamps import (
    parse_timestamp,
    to_utc,
    utc_now,
)
from .constants import (
    DEFAULT_TRACK_NAME,
    DEFAULT_SPORT_TYPE,
    DEFAULT_MAX_SPEED_KMH,
    MIN_TRACK_POINTS,
    SENSOR_TAG_HEART_RATE,
    SENSOR_TAG_CADENCE,
)

__all__ = [
    # geo
    "haversine",
    "speed_kmh",
    "EARTH_RADIUS_KM",
    # rounding
    "round_half_away",
    "truncate",
    "METRIC_DECIMALS",
    # timestamps
    "parse_timestamp",
    "to_utc",
    "utc_now",
    # constants
    "DEFAULT_TRACK_NAME",
    "DEFAULT_SPORT_TYPE",
    "DEFAULT_MAX_SPEED_KMH",
    "MIN_TRACK_POINTS",
    "SENSOR_TAG_HEART_RATE",
    "SENSOR_TAG_CADENCE",
]
