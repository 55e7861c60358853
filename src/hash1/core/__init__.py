"""Checksum calculation and verification core.

This package computes the checksums of one local file in a single pass and
verifies them against partially specified expected values.
"""

from hash1.core.engine import ChecksumEngine, buffer_size_for, compute_checksums
from hash1.core.expression import ChecksumPattern, parse_expression
from hash1.core.registry import (
    AlgorithmDescriptor,
    AlgorithmRegistry,
    HashAlgorithm,
    build_default_registry,
    default_registry,
)
from hash1.core.results import (
    ChecksumResult,
    ExpectedChecksum,
    MismatchRecord,
    VerificationOutcome,
    VerificationStatus,
)
from hash1.core.verifier import Verifier, verify

__all__ = [
    "AlgorithmDescriptor",
    "AlgorithmRegistry",
    "ChecksumEngine",
    "ChecksumPattern",
    "ChecksumResult",
    "ExpectedChecksum",
    "HashAlgorithm",
    "MismatchRecord",
    "VerificationOutcome",
    "VerificationStatus",
    "Verifier",
    "buffer_size_for",
    "build_default_registry",
    "compute_checksums",
    "default_registry",
    "parse_expression",
    "verify",
]
