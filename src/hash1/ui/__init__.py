"""UI module for presentation and display logic."""

from hash1.ui.formatters import (
    VERIFY_FAIL,
    VERIFY_OK,
    format_checksum_line,
    format_checksums,
    format_checksums_json,
    format_checksums_text,
    format_mismatches,
    format_verification,
)

__all__ = [
    "VERIFY_FAIL",
    "VERIFY_OK",
    "format_checksum_line",
    "format_checksums",
    "format_checksums_json",
    "format_checksums_text",
    "format_mismatches",
    "format_verification",
]
