"""Parser for expected checksum expressions.

An expression is one of:

* a full or partial hexadecimal checksum (a prefix), e.g. ``2cf24d``
* ``<prefix>...<suffix>`` with either side optionally empty
* ``...`` alone, which matches any checksum

Input is case-insensitive and either side may carry a ``0x`` marker.
"""

import re
from typing import NamedTuple

from hash1.constants import EXPRESSION_SEPARATOR, HEX_MARKER
from hash1.exceptions import InvalidHexError

_LOWER_HEX = re.compile(r"[0-9a-f]*")


class ChecksumPattern(NamedTuple):
    """Lowercase hexadecimal prefix and suffix of a checksum."""

    prefix: str
    suffix: str


def _normalize(candidate: str, part: str) -> str:
    value = candidate.strip().removeprefix(HEX_MARKER)
    if not _LOWER_HEX.fullmatch(value):
        raise InvalidHexError(part, candidate)
    return value


def parse_expression(raw: str) -> ChecksumPattern:
    """Parse a checksum expression into its prefix and suffix.

    Args:
        raw: Expression as given by the user

    Returns:
        The validated, lowercase prefix and suffix

    Raises:
        InvalidHexError: If either side is not hexadecimal; the error
            names the side and echoes it before whitespace and "0x"
            removal

    """
    prefix, _, suffix = raw.lower().partition(EXPRESSION_SEPARATOR)
    return ChecksumPattern(
        prefix=_normalize(prefix, "prefix"),
        suffix=_normalize(suffix, "suffix"),
    )
