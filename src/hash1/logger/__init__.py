"""Logging utilities for hash1.

This package provides structured logging with:
- Colored console output on the standard error stream
- Optional file rotation using standard RotatingFileHandler
- Configuration-based log levels (settings.conf)
- Thread-safe singleton pattern for root logger initialization
- Hierarchical logger naming (e.g., hash1.core.engine, hash1.cli.runner)

Usage:
    Basic usage in any module:
        >>> from hash1.logger import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Computing %s for %s", name, path)

RULES FOR CONTRIBUTORS:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers (only root has handlers)
    4. Never use f-strings in log calls; use %-formatting
"""

from hash1.logger.config import (
    update_logger_from_config as _update_config,
)
from hash1.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from hash1.logger.handlers import ConfigurationError, StderrHandler
from hash1.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    set_console_level,
    setup_logging,
)
from hash1.logger.state import _state, get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "StderrHandler",
    "_state",  # For testing only
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "set_console_level",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config=None) -> None:
    """Update logger handler levels and file logging from global config.

    Args:
        config: Already loaded global configuration, if available

    """
    setup_logging()
    _update_config(get_state(), config)
