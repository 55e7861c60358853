"""Verifier comparing computed checksums with expected expressions.

Verification never raises for bad input or file faults: the error is
returned inside a VerificationOutcome together with its kind, so callers
can tell an illegal invocation from a fault of the environment.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from hash1.core.engine import ChecksumEngine
from hash1.core.expression import parse_expression
from hash1.core.registry import (
    AlgorithmRegistry,
    HashAlgorithm,
    default_registry,
)
from hash1.core.results import (
    ExpectedChecksum,
    MismatchRecord,
    VerificationOutcome,
)
from hash1.exceptions import (
    FileAccessError,
    Hash1Error,
    InvalidHexError,
    NoChecksumError,
    UsageError,
)
from hash1.logger import get_logger

if TYPE_CHECKING:
    from os import PathLike

logger = get_logger(__name__)


class Verifier:
    """Verifies a file against expected checksum expressions."""

    def __init__(
        self,
        registry: AlgorithmRegistry | None = None,
        engine: ChecksumEngine | None = None,
    ) -> None:
        """Create a verifier.

        Args:
            registry: Registry resolving algorithm names
            engine: Engine computing the checksums; built on the same
                registry if omitted

        """
        self.registry = registry or default_registry()
        self.engine = engine or ChecksumEngine(self.registry)

    def parse_expressions(
        self, expressions: Mapping[str | HashAlgorithm, str]
    ) -> list[ExpectedChecksum]:
        """Parse every non-empty expression.

        Args:
            expressions: Raw expressions keyed by algorithm name, alias,
                or enum member

        Returns:
            Expected checksums in registry order

        Raises:
            UnknownAlgorithmError: If a key does not resolve
            UsageError: If two expressions target the same algorithm
            InvalidHexError: If an expression is not hexadecimal
            NoChecksumError: If every expression is empty

        """
        raw_by_algorithm: dict[HashAlgorithm, str] = {}
        for key, raw in expressions.items():
            if not raw:
                continue
            name = key if isinstance(key, HashAlgorithm) else key.lower()
            desc = self.registry.require(name)
            if desc.algorithm in raw_by_algorithm:
                msg = "more than one hash checksum specified"
                raise UsageError(msg, desc.display_name)
            raw_by_algorithm[desc.algorithm] = raw

        if not raw_by_algorithm:
            raise NoChecksumError

        expected = []
        for algorithm in sorted(raw_by_algorithm, key=self.registry.rank):
            desc = self.registry.descriptor(algorithm)
            try:
                pattern = parse_expression(raw_by_algorithm[algorithm])
            except InvalidHexError as e:
                raise InvalidHexError(
                    e.part, e.value, desc.display_name
                ) from e
            expected.append(
                ExpectedChecksum(
                    algorithm=algorithm,
                    prefix=pattern.prefix,
                    suffix=pattern.suffix,
                )
            )
        return expected

    def verify(
        self,
        file_path: str | PathLike[str],
        expressions: Mapping[str | HashAlgorithm, str],
        upper: bool = False,  # noqa: FBT001, FBT002
    ) -> VerificationOutcome:
        """Verify a file against expected checksum expressions.

        Args:
            file_path: File to verify
            expressions: Raw expressions keyed by algorithm name, alias,
                or enum member; empty strings are ignored
            upper: Whether reported mismatches use uppercase digests

        Returns:
            The mismatches in registry order, or the error that stopped
            verification

        """
        try:
            expected = self.parse_expressions(expressions)
        except Hash1Error as e:
            logger.debug("Rejected checksum expressions: %s", e)
            return VerificationOutcome.failure(e)

        try:
            checksums = self.engine.compute_checksums(
                file_path, [e.algorithm for e in expected]
            )
        except FileAccessError as e:
            logger.debug("Cannot verify %s: %s", file_path, e)
            return VerificationOutcome.failure(e)

        mismatches = []
        for exp, result in zip(expected, checksums, strict=True):
            if exp.matches(result.checksum):
                logger.debug("%s matches", result.hash_name)
                continue
            logger.debug(
                "%s mismatch: got %s, want %s...%s",
                result.hash_name,
                result.checksum,
                exp.prefix,
                exp.suffix,
            )
            mismatches.append(
                MismatchRecord(
                    hash_name=result.hash_name,
                    checksum=(
                        result.checksum.upper() if upper else result.checksum
                    ),
                )
            )
        return VerificationOutcome(mismatches=tuple(mismatches))


def verify(
    file_path: str | PathLike[str],
    expressions: Mapping[str | HashAlgorithm, str],
    upper: bool = False,  # noqa: FBT001, FBT002
) -> VerificationOutcome:
    """Verify a file using the default registry.

    See Verifier.verify for details.
    """
    return Verifier().verify(file_path, expressions, upper)
