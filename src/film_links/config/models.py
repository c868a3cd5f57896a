"""Configuration data models."""

import os
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_PRIVILEGED_JOBS = [
    "Director",
    "Screenplay",
    "Original Music Composer",
    "Director of Photography",
    "Novel",
]


class TMDbConfig(BaseModel):
    """TMDb API configuration."""

    api_key: str = Field(..., description="TMDb API key")
    base_url: str = Field(default="https://api.themoviedb.org/3", description="TMDb API base URL")
    image_base_url: str = Field(
        default="https://image.tmdb.org/t/p/w154",
        description="CDN prefix for poster and profile paths",
    )
    language: str = Field(default="en-US", description="Default language for requests")
    timeout: int = Field(default=10, gt=0, description="Request timeout in seconds")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Expand environment variables in API key."""
        return os.path.expandvars(v)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Drop a trailing slash so paths can be appended."""
        return v.rstrip("/")


class SuggestionConfig(BaseModel):
    """Suggestion service configuration."""

    base_url: str = Field(
        default=(
            "https://cinenerdle-suggestion-server-e031df6af7d2.herokuapp.com"
            "/suggestion-list/movies"
        ),
        description="Suggestion list endpoint",
    )
    timeout: int = Field(default=10, gt=0, description="Request timeout in seconds")


class EnrichmentConfig(BaseModel):
    """Actor/movie cross-reference configuration."""

    max_concurrency: int = Field(
        default=16, gt=0, description="Maximum suggestion lookups in flight"
    )
    privileged_jobs: List[str] = Field(
        default_factory=lambda: list(DEFAULT_PRIVILEGED_JOBS),
        description="Crew jobs listed ahead of the cast",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    file: Optional[str] = Field(default=None, description="Log file path")
    max_size_mb: int = Field(default=10, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Config(BaseModel):
    """Main configuration model."""

    tmdb: TMDbConfig = Field(..., description="TMDb configuration")
    suggestions: SuggestionConfig = Field(
        default_factory=SuggestionConfig, description="Suggestion service configuration"
    )
    enrichment: EnrichmentConfig = Field(
        default_factory=EnrichmentConfig, description="Cross-reference configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )
