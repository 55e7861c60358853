"""Path constants and utilities for hash1 configuration.

This module centralizes all path management for the application,
making it easy to reference and override paths consistently.
"""

import os
from pathlib import Path

from hash1.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
)


class Paths:
    """Application paths and directory structure."""

    HOME_DIR = Path.home()
    DEFAULT_CONFIG_DIR = HOME_DIR / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def config_dir(cls) -> Path:
        """Return the configuration directory.

        ``HASH1_CONFIG_DIR`` overrides the default ``~/.config/hash1``.
        """
        env_dir = os.getenv(ENV_CONFIG_DIR)
        if env_dir:
            return cls.expand_path(env_dir)
        return cls.DEFAULT_CONFIG_DIR

    @classmethod
    def settings_file(cls, config_dir: Path | None = None) -> Path:
        """Return the path of settings.conf inside a config directory."""
        return (config_dir or cls.config_dir()) / CONFIG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand and resolve path with ~ and relative path support.

        Example:
            >>> Paths.expand_path("~/Documents")
            Path('/home/user/Documents')
        """
        return Path(path_str).expanduser().resolve(strict=False)
