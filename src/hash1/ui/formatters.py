"""Formatting of checksum and verification results for display.

Plain text lists one ``NAME: checksum`` line per algorithm; JSON output
is an array of ``{"hashName", "checksum"}`` objects rendered with orjson.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import orjson

if TYPE_CHECKING:
    from hash1.core.results import (
        ChecksumResult,
        MismatchRecord,
        VerificationOutcome,
    )

VERIFY_OK = "OK"
VERIFY_FAIL = "FAIL"


def format_checksum_line(hash_name: str, checksum: str) -> str:
    """Format one ``NAME: checksum`` line without a line break."""
    return f"{hash_name}: {checksum}"


def format_checksums_text(checksums: Iterable[ChecksumResult]) -> str:
    """Format checksums as plain text, one line each."""
    return "".join(
        format_checksum_line(c.hash_name, c.checksum) + "\n"
        for c in checksums
    )


def format_checksums_json(checksums: Iterable[ChecksumResult]) -> str:
    """Format checksums as an indented JSON array with a final newline."""
    return orjson.dumps(
        [c.to_dict() for c in checksums],
        option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE,
    ).decode("utf-8")


def format_checksums(
    checksums: Iterable[ChecksumResult],
    as_json: bool = False,  # noqa: FBT001, FBT002
) -> str:
    """Format checksums as text or JSON."""
    if as_json:
        return format_checksums_json(checksums)
    return format_checksums_text(checksums)


def format_mismatches(mismatches: Iterable[MismatchRecord]) -> str:
    """Format mismatched checksums, one line each."""
    return "".join(
        format_checksum_line(m.hash_name, m.checksum) + "\n"
        for m in mismatches
    )


def format_verification(outcome: VerificationOutcome) -> str:
    """Format a completed verification as ``OK`` or ``FAIL`` plus details.

    Raises:
        ValueError: If the outcome carries an error instead of a result

    """
    if outcome.error is not None:
        msg = "cannot format a verification that ended with an error"
        raise ValueError(msg)
    if outcome.passed:
        return f"{VERIFY_OK}\n"
    return f"{VERIFY_FAIL}\n" + format_mismatches(outcome.mismatches)
