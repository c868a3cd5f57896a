"""Configuration management module."""

from .config_manager import ConfigManager
from .models import Config, EnrichmentConfig, LoggingConfig, SuggestionConfig, TMDbConfig

__all__ = [
    "ConfigManager",
    "Config",
    "TMDbConfig",
    "SuggestionConfig",
    "EnrichmentConfig",
    "LoggingConfig",
]
