"""Handler creation and management for logging system.

This module provides functions for creating and configuring logging handlers:
- Console handler on the standard error stream with hybrid formatting
- Rotating file handler with automatic log rotation
- Root logger setup

The console writes to stderr because stdout carries the checksums.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from hash1.constants import (
    APP_NAME,
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
)
from hash1.logger.formatters import (
    HybridConsoleFormatter,
    stderr_supports_color,
)

if TYPE_CHECKING:
    from hash1.logger.state import _LoggerState


class ConfigurationError(Exception):
    """Error in logging configuration."""


class StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever ``sys.stderr`` is at emit time.

    Keeps working when the stream is swapped after setup (pytest's
    capture, output redirection in the CLI).
    """

    def __init__(self) -> None:
        """Initialize handler without binding a stream."""
        super().__init__()

    @property
    def stream(self):  # type: ignore[override]
        """Return the current standard error stream."""
        return sys.stderr

    @stream.setter
    def stream(self, value) -> None:
        """Ignore assignments; the stream is always ``sys.stderr``."""


def _create_console_handler(console_level: str) -> logging.Handler:
    """Create and configure console handler with hybrid formatting.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "WARNING")

    Returns:
        Configured handler for console output

    """
    console_handler = StderrHandler()
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
            use_color=stderr_supports_color(),
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def create_file_handler(log_file: Path, file_level: str) -> RotatingFileHandler:
    """Create and configure rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If file handler creation fails

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                LOG_FILE_FORMAT,
                datefmt=LOG_FILE_DATE_FORMAT,
            )
        )
        file_handler.setLevel(getattr(logging, file_level, logging.INFO))
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg) from e
    else:
        return file_handler


def setup_root_logger(
    state: "_LoggerState",
    console_level: str,
    file_level: str,
    log_file: Path,
    enable_file_logging: bool,  # noqa: FBT001
) -> None:
    """Initialize the ``hash1`` root logger and attach its handlers.

    Args:
        state: Logger state object (from logger.state module)
        console_level: Console log level (e.g., "INFO", "WARNING")
        file_level: File log level (e.g., "DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to enable file logging

    Raises:
        ConfigurationError: If handler setup fails

    """
    root_logger = logging.getLogger(APP_NAME)
    root_logger.setLevel(logging.DEBUG)  # Capture all, filter at handlers
    root_logger.propagate = False

    # Remove any existing handlers (for test isolation)
    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    state.console_handler = _create_console_handler(console_level)
    root_logger.addHandler(state.console_handler)

    if enable_file_logging:
        state.file_handler = create_file_handler(log_file, file_level)
        root_logger.addHandler(state.file_handler)

    state.root_initialized = True
