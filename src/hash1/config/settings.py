"""Global configuration manager for INI settings."""

import configparser
from datetime import UTC, datetime
from pathlib import Path
from typing import TypedDict

from hash1.config.paths import Paths
from hash1.constants import (
    CONFIG_VERSION,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_FILE_LOGGING,
    DEFAULT_LOG_LEVEL,
    ISO_DATETIME_FORMAT,
    KEY_CONFIG_VERSION,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_FILE_ENABLED,
    KEY_JSON,
    KEY_LOG_LEVEL,
    KEY_UPPERCASE,
    SECTION_DEFAULT,
    SECTION_LOGGING,
    SECTION_OUTPUT,
    VALID_LOG_LEVELS,
)
from hash1.logger import get_logger

logger = get_logger(__name__)


class LoggingConfig(TypedDict):
    """Settings of the [logging] section."""

    file_enabled: bool


class OutputConfig(TypedDict):
    """Settings of the [output] section."""

    uppercase: bool
    json: bool


class GlobalConfig(TypedDict):
    """Parsed content of settings.conf."""

    config_version: str
    log_level: str
    console_log_level: str
    logging: LoggingConfig
    output: OutputConfig


def _new_parser() -> configparser.ConfigParser:
    return configparser.ConfigParser(
        inline_comment_prefixes=("#", ";"),
        interpolation=None,
    )


class GlobalConfigManager:
    """Manages the global INI configuration."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize global config manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.config_dir())

        """
        self.config_dir = config_dir or Paths.config_dir()
        self.settings_file = Paths.settings_file(self.config_dir)

    def get_default_global_config(self) -> GlobalConfig:
        """Get default global configuration values."""
        return {
            KEY_CONFIG_VERSION: CONFIG_VERSION,
            KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
            KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
            SECTION_LOGGING: {KEY_FILE_ENABLED: DEFAULT_FILE_LOGGING},
            SECTION_OUTPUT: {KEY_UPPERCASE: False, KEY_JSON: False},
        }

    def load_global_config(self) -> GlobalConfig:
        """Load global configuration from the INI file.

        A missing file yields the defaults and is created with them, so
        the user has a commented file to edit. A file that is not valid
        INI, and invalid values, are replaced by their defaults and
        reported as warnings.

        Returns:
            Loaded global configuration

        """
        config = self.get_default_global_config()
        if not self.settings_file.exists():
            self._create_default_file(config)
            return config

        parser = _new_parser()
        try:
            parser.read(self.settings_file, encoding="utf-8")
        except (configparser.Error, UnicodeDecodeError) as e:
            logger.warning(
                "Ignoring unreadable settings file %s: %s",
                self.settings_file,
                e,
            )
            return config
        logger.debug("Loaded settings from %s", self.settings_file)

        defaults = parser[SECTION_DEFAULT]
        config[KEY_CONFIG_VERSION] = defaults.get(
            KEY_CONFIG_VERSION, CONFIG_VERSION
        )
        config[KEY_LOG_LEVEL] = self._read_level(
            defaults.get(KEY_LOG_LEVEL), KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL
        )
        config[KEY_CONSOLE_LOG_LEVEL] = self._read_level(
            defaults.get(KEY_CONSOLE_LOG_LEVEL),
            KEY_CONSOLE_LOG_LEVEL,
            DEFAULT_CONSOLE_LOG_LEVEL,
        )
        config[SECTION_LOGGING][KEY_FILE_ENABLED] = self._read_bool(
            parser, SECTION_LOGGING, KEY_FILE_ENABLED, DEFAULT_FILE_LOGGING
        )
        for key in (KEY_UPPERCASE, KEY_JSON):
            config[SECTION_OUTPUT][key] = self._read_bool(
                parser, SECTION_OUTPUT, key, False
            )
        return config

    def save_global_config(self, config: GlobalConfig) -> None:
        """Save global configuration to INI file with a comment header."""
        parser = _new_parser()
        parser[SECTION_DEFAULT] = {
            KEY_CONFIG_VERSION: config[KEY_CONFIG_VERSION],
            KEY_LOG_LEVEL: config[KEY_LOG_LEVEL],
            KEY_CONSOLE_LOG_LEVEL: config[KEY_CONSOLE_LOG_LEVEL],
        }
        parser[SECTION_LOGGING] = {
            KEY_FILE_ENABLED: str(
                config[SECTION_LOGGING][KEY_FILE_ENABLED]
            ).lower(),
        }
        parser[SECTION_OUTPUT] = {
            key: str(value).lower()
            for key, value in config[SECTION_OUTPUT].items()
        }

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with self.settings_file.open("w", encoding="utf-8") as f:
            f.write(self._file_header())
            parser.write(f)
        logger.debug("Saved settings to %s", self.settings_file)

    def _create_default_file(self, config: GlobalConfig) -> None:
        try:
            self.save_global_config(config)
        except OSError as e:
            # read-only home directories still get the defaults
            logger.warning(
                "Cannot create settings file %s: %s", self.settings_file, e
            )

    @staticmethod
    def _file_header() -> str:
        timestamp = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return f"""# hash1 configuration
# log_level applies to the log file, console_log_level to the terminal.
# Valid levels: {", ".join(VALID_LOG_LEVELS)}
#
# Last updated: {timestamp}
# Configuration version: {CONFIG_VERSION}

"""

    @staticmethod
    def _read_level(value: str | None, key: str, default: str) -> str:
        if value is None:
            return default
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            logger.warning(
                "Invalid %s %r in settings, using %s", key, value, default
            )
            return default
        return level

    @staticmethod
    def _read_bool(
        parser: configparser.ConfigParser,
        section: str,
        key: str,
        default: bool,  # noqa: FBT001
    ) -> bool:
        if not parser.has_section(section):
            return default
        try:
            return parser.getboolean(section, key, fallback=default)
        except ValueError:
            logger.warning(
                "Invalid boolean for [%s] %s in settings, using %s",
                section,
                key,
                default,
            )
            return default
