"""Result types for checksum calculation and verification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hash1.core.registry import HashAlgorithm
    from hash1.exceptions import ErrorKind, Hash1Error


@dataclass(slots=True, frozen=True)
class ChecksumResult:
    """Hash algorithm display name and hexadecimal checksum."""

    hash_name: str
    checksum: str

    def to_dict(self) -> dict[str, str]:
        """Convert to the JSON object used by the print command."""
        return {"hashName": self.hash_name, "checksum": self.checksum}


@dataclass(slots=True, frozen=True)
class ExpectedChecksum:
    """Expected prefix and suffix of one algorithm's checksum.

    Both parts are lowercase hexadecimal, possibly empty.
    """

    algorithm: HashAlgorithm
    prefix: str
    suffix: str

    def matches(self, digest: str) -> bool:
        """Report whether a lowercase digest satisfies this expectation.

        The suffix is tested against what remains after removing
        len(prefix) characters, so a prefix and suffix longer than the
        digest together are not rejected up front.
        """
        return digest.startswith(self.prefix) and digest[
            len(self.prefix) :
        ].endswith(self.suffix)


@dataclass(slots=True, frozen=True)
class MismatchRecord:
    """Actual checksum of an algorithm whose expectation failed."""

    hash_name: str
    checksum: str


class VerificationStatus(Enum):
    """Overall state of a verification."""

    OK = "ok"
    MISMATCH = "mismatch"
    ERROR = "error"


@dataclass(slots=True, frozen=True)
class VerificationOutcome:
    """Result of a verification: mismatches or an error, never both.

    Attributes:
        mismatches: Failed algorithms in registry order
        error: The error that stopped verification, if any

    """

    mismatches: tuple[MismatchRecord, ...] = field(default_factory=tuple)
    error: Hash1Error | None = None

    @classmethod
    def failure(cls, error: Hash1Error) -> VerificationOutcome:
        """Create an outcome for a verification that could not complete."""
        return cls(mismatches=(), error=error)

    @property
    def error_kind(self) -> ErrorKind | None:
        """Kind of the error, or None on completed verification."""
        return self.error.kind if self.error is not None else None

    @property
    def is_usage_error(self) -> bool:
        """Whether the error reports an illegal use of hash1."""
        return self.error is not None and self.error.is_usage_error

    @property
    def passed(self) -> bool:
        """Whether every expected checksum matched."""
        return self.error is None and not self.mismatches

    @property
    def status(self) -> VerificationStatus:
        """Overall state of the verification."""
        if self.error is not None:
            return VerificationStatus.ERROR
        if self.mismatches:
            return VerificationStatus.MISMATCH
        return VerificationStatus.OK
