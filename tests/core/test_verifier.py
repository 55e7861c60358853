"""Tests for checksum verification."""

import pytest

from hash1.core.registry import HashAlgorithm, build_default_registry
from hash1.core.results import (
    ExpectedChecksum,
    MismatchRecord,
    VerificationStatus,
)
from hash1.core.verifier import Verifier, verify
from hash1.exceptions import (
    ErrorKind,
    InvalidHexError,
    NoChecksumError,
    UnknownAlgorithmError,
    UsageError,
)
from tests.checksum_data import HASHLIB_REFERENCE, HELLO_SHA256, TEST_FILES


@pytest.fixture
def verifier() -> Verifier:
    """Verifier on a fresh default registry."""
    return Verifier(build_default_registry())


def _flip(checksum: str, index: int) -> str:
    """Change one hex digit of a checksum."""
    replacement = "0" if checksum[index] != "0" else "1"
    return checksum[:index] + replacement + checksum[index + 1 :]


class TestParseExpressions:
    """Test Verifier.parse_expressions."""

    def test_empty_values_are_skipped(self, verifier):
        expected = verifier.parse_expressions(
            {"md5": "", "sha256": "2cf", "sha1": ""}
        )
        assert expected == [
            ExpectedChecksum(HashAlgorithm.SHA256, "2cf", "")
        ]

    def test_registry_order(self, verifier):
        expected = verifier.parse_expressions(
            {"blake2b-512": "ab", "md5": "cd"}
        )
        assert [e.algorithm for e in expected] == [
            HashAlgorithm.MD5,
            HashAlgorithm.BLAKE2B_512,
        ]

    def test_keys_are_lowercased(self, verifier):
        expected = verifier.parse_expressions({"SHA-256": "AB"})
        assert expected[0].algorithm is HashAlgorithm.SHA256
        assert expected[0].prefix == "ab"

    def test_all_empty(self, verifier):
        with pytest.raises(NoChecksumError):
            verifier.parse_expressions({"md5": "", "sha256": ""})

    def test_no_expressions(self, verifier):
        with pytest.raises(NoChecksumError):
            verifier.parse_expressions({})

    def test_unknown_key(self, verifier):
        with pytest.raises(UnknownAlgorithmError):
            verifier.parse_expressions({"whirlpool": "ab"})

    def test_two_expressions_for_one_algorithm(self, verifier):
        with pytest.raises(UsageError) as exc_info:
            verifier.parse_expressions({"sha256": "ab", "s": "cd"})
        assert exc_info.value.target == "SHA-256"
        assert "more than one" in exc_info.value.message

    def test_invalid_hex_names_algorithm(self, verifier):
        with pytest.raises(InvalidHexError) as exc_info:
            verifier.parse_expressions({"sha-512/224": "3x12"})
        assert exc_info.value.target == "SHA-512/224"
        assert exc_info.value.part == "prefix"
        assert exc_info.value.value == "3x12"


def test_hello_full_checksum(verifier, hello_file):
    """The exact SHA-256 of "hello" verifies."""
    outcome = verifier.verify(hello_file, {"sha256": HELLO_SHA256})
    assert outcome.passed
    assert outcome.status is VerificationStatus.OK
    assert outcome.mismatches == ()


def test_case_insensitive_with_marker(verifier, hello_file):
    """Uppercase and 0x markers are accepted on both sides."""
    outcome = verifier.verify(
        hello_file, {HashAlgorithm.SHA256: "0X2CF24D...0x9824"}
    )
    assert outcome.passed


@pytest.mark.parametrize("filename", list(TEST_FILES))
def test_every_split_point_verifies(
    verifier, testdata, expected_checksums, filename
):
    """Any prefix...suffix split of the true digest verifies."""
    for hash_name in ("MD5", "SHA-256", "BLAKE2s-256"):
        checksum = expected_checksums[filename][hash_name]
        for split in range(len(checksum) + 1):
            expression = f"{checksum[:split]}...{checksum[split:]}"
            outcome = verifier.verify(
                testdata / filename, {hash_name.lower(): expression}
            )
            assert outcome.passed, (hash_name, expression)


def test_match_anything(verifier, testdata):
    """"..." alone passes for every algorithm and file."""
    for filename in TEST_FILES:
        outcome = verifier.verify(
            testdata / filename,
            {d.name: "..." for d in verifier.registry},
        )
        assert outcome.passed


def test_whitespace_expression_matches_anything(verifier, hello_file):
    """A blank expression is present and unconstrained."""
    assert verifier.verify(hello_file, {"md5": "   "}).passed


@pytest.mark.parametrize("hash_name", list(HASHLIB_REFERENCE))
def test_single_flip_reports_one_mismatch(
    verifier, testdata, expected_checksums, hash_name
):
    """Changing one digit fails exactly that algorithm."""
    checksums = expected_checksums["lorem.txt"]
    expressions = {name.lower(): checksums[name] for name in checksums}
    expressions[hash_name.lower()] = _flip(checksums[hash_name], 3)

    outcome = verifier.verify(testdata / "lorem.txt", expressions)

    assert outcome.status is VerificationStatus.MISMATCH
    assert outcome.mismatches == (
        MismatchRecord(hash_name, checksums[hash_name]),
    )


def test_mismatches_in_registry_order(verifier, hello_file):
    """Mismatches are listed in registration order."""
    outcome = verifier.verify(
        hello_file, {"blake2b-256": "00", "sha1": "00", "md5": "00"}
    )
    assert [m.hash_name for m in outcome.mismatches] == [
        "MD5",
        "SHA-1",
        "BLAKE2b-256",
    ]


def test_upper_mismatch_report(verifier, hello_file):
    """Mismatch digests follow the requested case."""
    outcome = verifier.verify(hello_file, {"sha256": "00"}, upper=True)
    assert outcome.mismatches[0].checksum == HELLO_SHA256.upper()


def test_suffix_only_mismatch(verifier, hello_file):
    """A wrong suffix fails even with a right prefix."""
    outcome = verifier.verify(hello_file, {"sha256": "2cf24d...9825"})
    assert not outcome.passed


class TestOverlappingPrefixAndSuffix:
    """Prefix and suffix are matched positionally."""

    def test_whole_digest_twice_fails(self, verifier, hello_file):
        # The suffix must fit into what remains after the prefix
        outcome = verifier.verify(
            hello_file, {"sha256": f"{HELLO_SHA256}...{HELLO_SHA256[-4:]}"}
        )
        assert not outcome.passed

    def test_overlapping_windows_fail(self, verifier, hello_file):
        prefix, suffix = HELLO_SHA256[:40], HELLO_SHA256[30:]
        outcome = verifier.verify(hello_file, {"sha256": f"{prefix}...{suffix}"})
        assert not outcome.passed

    def test_full_prefix_empty_suffix_passes(self, verifier, hello_file):
        outcome = verifier.verify(hello_file, {"sha256": f"{HELLO_SHA256}..."})
        assert outcome.passed

    def test_matches_rule(self):
        expected = ExpectedChecksum(HashAlgorithm.MD5, "ab", "bc")
        assert expected.matches("abbc")
        assert not expected.matches("abc")
        assert ExpectedChecksum(HashAlgorithm.MD5, "", "").matches("")


class TestErrorOutcomes:
    """Errors are returned, never raised."""

    def test_no_checksum(self, verifier, hello_file):
        outcome = verifier.verify(hello_file, {})
        assert outcome.status is VerificationStatus.ERROR
        assert outcome.error_kind is ErrorKind.USAGE
        assert outcome.is_usage_error
        assert isinstance(outcome.error, NoChecksumError)

    def test_invalid_suffix(self, verifier, hello_file):
        outcome = verifier.verify(hello_file, {"sha256": "12...3x"})
        assert outcome.is_usage_error
        assert outcome.error.part == "suffix"
        assert outcome.error.value == "3x"

    def test_unknown_algorithm(self, verifier, hello_file):
        outcome = verifier.verify(hello_file, {"md4": "ab"})
        assert outcome.error_kind is ErrorKind.UNKNOWN_ALGORITHM
        assert outcome.is_usage_error

    def test_usage_error_checked_before_file(self, verifier, tmp_path):
        outcome = verifier.verify(tmp_path / "missing", {"sha256": "zz"})
        assert outcome.is_usage_error

    def test_missing_file(self, verifier, tmp_path):
        outcome = verifier.verify(tmp_path / "missing", {"sha256": "ab"})
        assert outcome.error_kind is ErrorKind.NOT_FOUND
        assert not outcome.is_usage_error
        assert not outcome.passed

    def test_directory(self, verifier, tmp_path):
        outcome = verifier.verify(tmp_path, {"sha256": "ab"})
        assert outcome.error_kind is ErrorKind.IS_DIRECTORY
        assert outcome.mismatches == ()


def test_module_level_function(hello_file):
    """verify uses the default registry."""
    assert verify(hello_file, {"s": "2cf24d"}).passed
