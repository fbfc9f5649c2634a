"""Configuration management module."""

from .config_manager import ConfigManager
from .models import (
    BrowserConfig,
    CollectionConfig,
    Config,
    LoggingConfig,
    RefreshConfig,
    RefreshSourceConfig,
    SourceConfig,
)

__all__ = [
    "ConfigManager",
    "Config",
    "CollectionConfig",
    "SourceConfig",
    "RefreshConfig",
    "RefreshSourceConfig",
    "BrowserConfig",
    "LoggingConfig",
]
