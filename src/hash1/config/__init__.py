"""Configuration management - settings file and path utilities.

This package provides:
- GlobalConfigManager: INI configuration management (from settings.py)
- Paths: Path constants and utilities (from paths.py)
"""

from hash1.config.paths import Paths
from hash1.config.settings import (
    GlobalConfig,
    GlobalConfigManager,
    LoggingConfig,
    OutputConfig,
)

__all__ = [
    "GlobalConfig",
    "GlobalConfigManager",
    "LoggingConfig",
    "OutputConfig",
    "Paths",
]
