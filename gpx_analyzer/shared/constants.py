"""
Unified constants for track import and metrics.

This module provides a single source of truth for default values
shared by the parser, the metrics aggregator and configuration.
"""

# Track name used when the GPX track has no (or a blank) <name>
DEFAULT_TRACK_NAME = "Imported GPX Activity"

# Sport label used when the uploader does not provide one
DEFAULT_SPORT_TYPE = "unknown"

# A track must have at least this many points to be analyzed
MIN_TRACK_POINTS = 2

# Segment speeds at or above this are GPS jitter/teleports, not movement.
# Whether a lower, sport-specific threshold would be better is still open.
DEFAULT_MAX_SPEED_KMH = 120.0

# Sensor readings in <extensions> are 1-3 digit integers (bpm, rpm)
SENSOR_TAG_HEART_RATE = "hr"
SENSOR_TAG_CADENCE = "cad"
