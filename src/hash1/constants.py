"""Centralized constants module for hash1.

This module serves as the single source of truth for all shared constants
across the hash1 codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from hash1.constants import DEFAULT_HASH_NAME
"""

from typing import Final

# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "hash1"
APP_DESCRIPTION: Final[str] = (
    "A tool to calculate the hash checksum of one local file"
)
APP_COPYRIGHT: Final[str] = "Copyright (C) 2023  hash1 contributors"
APP_SOURCE_URL: Final[str] = "https://github.com/donyori/hash1"

# =============================================================================
# Checksum Constants
# =============================================================================

# Canonical name of the algorithm used when none is requested
DEFAULT_HASH_NAME: Final[str] = "sha-256"

# Separator between the prefix and the suffix of a checksum expression
EXPRESSION_SEPARATOR: Final[str] = "..."

# Optional marker in front of either side of a checksum expression
HEX_MARKER: Final[str] = "0x"

# Read buffer sizing: the LCM of the block sizes is doubled until it
# reaches the minimum; the fallback is used when any block size is unknown
MIN_BUFFER_SIZE: Final[int] = 4096
FALLBACK_BUFFER_SIZE: Final[int] = 5120  # (2^10) * 5

# =============================================================================
# Exit Codes
# =============================================================================

EXIT_CODE_SUCCESS: Final[int] = 0
EXIT_CODE_ERROR: Final[int] = 1
EXIT_CODE_PANIC: Final[int] = 2
EXIT_CODE_VERIFY_FAIL: Final[int] = 3

# Output target of the print command meaning the standard error stream
OUTPUT_STDERR: Final[str] = "STDERR"

# File mode used when the print command writes to a target file
OUTPUT_FILE_MODE: Final[int] = 0o644

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_VERSION: Final[str] = "1.0.0"
CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "hash1"

# Environment overrides (used by the test suite for isolation)
ENV_CONFIG_DIR: Final[str] = "HASH1_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "HASH1_LOG_DIR"

ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_LOGGING: Final[str] = "logging"
SECTION_OUTPUT: Final[str] = "output"

KEY_CONFIG_VERSION: Final[str] = "config_version"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_FILE_ENABLED: Final[str] = "file_enabled"
KEY_UPPERCASE: Final[str] = "uppercase"
KEY_JSON: Final[str] = "json"

VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

# =============================================================================
# Logging Constants
# =============================================================================

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_FILE_LOGGING: Final[bool] = False

LOG_FILE_NAME: Final[str] = "hash1.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
