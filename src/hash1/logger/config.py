"""Configuration loading and updating for logging system.

This module provides functions to load logger bootstrap settings and to
apply the user's settings file once it has been read. It avoids importing
the config package at module level so that config can log through us.
"""

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from hash1.constants import (
    APP_NAME,
    CONFIG_DIR_NAME,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_FILE_ENABLED,
    KEY_LOG_LEVEL,
    LOG_FILE_NAME,
    SECTION_LOGGING,
)
from hash1.logger.handlers import ConfigurationError, create_file_handler

if TYPE_CHECKING:
    from hash1.logger.state import _LoggerState

# get_logger would import this module back
logger = logging.getLogger(__name__)


def default_log_path() -> Path:
    """Return the log file path, honoring the ``HASH1_LOG_DIR`` override."""
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser() / LOG_FILE_NAME
    return Path.home() / CONFIG_DIR_NAME / APP_NAME / "logs" / LOG_FILE_NAME


def load_log_settings() -> tuple[str, str, Path]:
    """Load default console level, file level, and file path.

    Returns hardcoded defaults to avoid circular imports during module init.
    Call update_logger_from_config() after initialization to use config values.

    Returns:
        Tuple of (console_level, file_level, log_path)

    """
    return DEFAULT_CONSOLE_LOG_LEVEL, DEFAULT_LOG_LEVEL, default_log_path()


def update_logger_from_config(
    state: "_LoggerState", config: dict[str, Any] | None = None
) -> None:
    """Apply log levels and file logging from the global config.

    Args:
        state: Logger state object (from logger.state module)
        config: Loaded global configuration; loaded from the settings
            file when omitted

    """
    if config is None:
        # Import here to avoid circular dependency
        from hash1.config import GlobalConfigManager  # noqa: PLC0415

        config = GlobalConfigManager().load_global_config()

    console_level = getattr(
        logging, config.get(KEY_CONSOLE_LOG_LEVEL, ""), logging.WARNING
    )
    file_level_name = config.get(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    file_enabled = config.get(SECTION_LOGGING, {}).get(KEY_FILE_ENABLED, False)

    with state.lock:
        if state.console_handler is not None:
            state.console_handler.setLevel(console_level)

        root_logger = logging.getLogger(APP_NAME)
        if not file_enabled:
            if state.file_handler is not None:
                root_logger.removeHandler(state.file_handler)
                state.file_handler.close()
                state.file_handler = None
        elif state.file_handler is None:
            try:
                state.file_handler = create_file_handler(
                    default_log_path(), file_level_name
                )
            except ConfigurationError as e:
                logger.warning("%s; file logging is disabled", e)
            else:
                root_logger.addHandler(state.file_handler)
        else:
            state.file_handler.setLevel(
                getattr(logging, file_level_name, logging.INFO)
            )

        state.config_applied = True
