"""Tests for result types."""

import dataclasses

import pytest

from hash1.core.results import (
    ChecksumResult,
    MismatchRecord,
    VerificationOutcome,
    VerificationStatus,
)
from hash1.exceptions import FileReadError


def test_checksum_result_to_dict():
    """The dict uses the JSON key names."""
    result = ChecksumResult("SHA-256", "abcd")
    assert result.to_dict() == {"hashName": "SHA-256", "checksum": "abcd"}


def test_results_are_immutable():
    """Results cannot be changed once created."""
    result = ChecksumResult("MD5", "00")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.checksum = "11"  # type: ignore[misc]


def test_outcome_statuses():
    """Status distinguishes pass, mismatch and error."""
    assert VerificationOutcome().status is VerificationStatus.OK
    assert VerificationOutcome().passed

    mismatch = VerificationOutcome(mismatches=(MismatchRecord("MD5", "00"),))
    assert mismatch.status is VerificationStatus.MISMATCH
    assert not mismatch.passed
    assert mismatch.error_kind is None

    failed = VerificationOutcome.failure(FileReadError("boom", "f"))
    assert failed.status is VerificationStatus.ERROR
    assert not failed.passed
    assert not failed.is_usage_error
    assert failed.mismatches == ()
