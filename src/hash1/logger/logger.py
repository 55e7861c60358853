"""Main logger module providing public API functions.

This module contains the core public API for the hash1 logging system:
- setup_logging(): Configure the root logger once and return a logger
- get_logger(): Get or create logger instance with singleton pattern
- set_console_level(): Change the console verbosity (used by --debug)
- flush_all_handlers(): Ensure all pending log records are written
- clear_logger_state(): Clear global logger state for testing
"""

import contextlib
import logging
from pathlib import Path

from hash1.constants import APP_NAME
from hash1.logger.config import load_log_settings
from hash1.logger.handlers import setup_root_logger
from hash1.logger.state import get_state


def flush_all_handlers() -> None:
    """Flush the console and file handlers of the root logger."""
    state = get_state()
    for handler in (state.console_handler, state.file_handler):
        if handler is not None:
            with contextlib.suppress(OSError, ValueError):
                # Ignore flush errors (handler closed/unavailable)
                handler.flush()


def setup_logging(
    name: str = APP_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
    enable_file_logging: bool = False,  # noqa: FBT001, FBT002
) -> logging.Logger:
    """Configure logging and return the requested logger.

    The ``hash1`` root logger is initialized exactly once; child loggers
    such as ``hash1.core.engine`` propagate to it.

    Args:
        name: Logger name, typically __name__ for module-level loggers
        console_level: Console log level ("DEBUG", "INFO", "WARNING")
        file_level: File log level ("DEBUG", "INFO")
        log_file: Path to log file
        enable_file_logging: Whether to attach the rotating file handler

    Returns:
        Logger instance (singleton per name via logging.getLogger)

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            cfg_console, cfg_file, cfg_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or cfg_console,
                file_level or cfg_file,
                log_file or cfg_path,
                enable_file_logging,
            )

    return logging.getLogger(name)


def get_logger(name: str = APP_NAME) -> logging.Logger:
    """Get or create logger instance with singleton pattern.

    Best Practice:
        Use __name__ as the logger name for proper hierarchical logging:
        >>> logger = get_logger(__name__)

    """
    return setup_logging(name=name)


def set_console_level(level: str) -> None:
    """Set the level of the console handler.

    Args:
        level: Level name such as "DEBUG" or "WARNING"

    """
    setup_logging()
    state = get_state()
    if state.console_handler is not None:
        state.console_handler.setLevel(
            getattr(logging, level.upper(), logging.WARNING)
        )


def clear_logger_state() -> None:
    """Clear global logger state for testing purposes.

    Closes all handlers of the ``hash1`` loggers and resets the state
    flags so the next call to get_logger() starts from scratch.
    """
    state = get_state()
    with state.lock:
        flush_all_handlers()

        state.console_handler = None
        state.file_handler = None
        state.root_initialized = False
        state.config_applied = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name == APP_NAME or logger_name.startswith(
                f"{APP_NAME}."
            ):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
