"""
GPX file handling module.

Usage:
    from gpx_analyzer.features.gpx import GPXParserService, MalformedGPXError

Components:
- GPXParserService: Parse GPX bytes into a ParsedTrack
- MalformedGPXError: Raised for unusable uploads
- TrackPoint / ParsedTrack: Pydantic schemas for parsed data
"""

from .parser import (
    GPXParserService,
    MalformedGPXError,
    extract_sensor_value,
    extensions_to_markup,
)
from .schemas import ParsedTrack, TrackPoint

__all__ = [
    # Services
    "GPXParserService",
    "MalformedGPXError",
    "extract_sensor_value",
    "extensions_to_markup",
    # Schemas
    "ParsedTrack",
    "TrackPoint",
]
