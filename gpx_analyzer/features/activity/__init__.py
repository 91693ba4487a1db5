"""
Activity import module.

Usage:
    from gpx_analyzer.features.activity import ActivityImportService

Components:
- ActivityImportService: Upload pipeline (parse -> sport type -> metrics)
- ActivityImport: Pydantic schema handed to persistence
"""

from .schemas import ActivityImport
from .service import ActivityImportService, normalize_sport_type

__all__ = [
    # Schemas
    "ActivityImport",
    # Service
    "ActivityImportService",
    "normalize_sport_type",
]
