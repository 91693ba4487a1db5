"""
Analyzer Configuration

Uses Pydantic Settings for type-safe configuration.
All defaults reproduce the fixed import behavior; environment variables
(prefix GPX_ANALYZER_) only tune it.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from gpx_analyzer.shared.constants import DEFAULT_MAX_SPEED_KMH, DEFAULT_SPORT_TYPE


class Settings(BaseSettings):
    """Analyzer settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Metrics ===
    max_speed_kmh: float = Field(
        default=DEFAULT_MAX_SPEED_KMH,
        gt=0,
        description="Segment speeds at or above this are ignored for max speed"
    )

    # === Activity import ===
    default_sport_type: str = Field(
        default=DEFAULT_SPORT_TYPE,
        description="Sport label used when the uploader sends none"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... as well as 'DEBUG'."""
        return v.strip().upper()

    @field_validator('default_sport_type')
    @classmethod
    def strip_sport_type(cls, v: str) -> str:
        """Blank default falls back to 'unknown'."""
        return v.strip() or DEFAULT_SPORT_TYPE

    model_config = SettingsConfigDict(
        env_prefix="GPX_ANALYZER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
