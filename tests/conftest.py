"""Pytest configuration and fixtures for hash1 tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from hash1.logger import set_console_level
from tests.checksum_data import (
    TEST_FILES,
    load_checksum_sidecar,
    write_checksum_sidecar,
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("hash1"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path_factory: pytest.TempPathFactory,
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[Path]:
    """Keep settings and logs of the user out of every test."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HASH1_CONFIG_DIR", str(home / "config"))
    monkeypatch.setenv("HASH1_LOG_DIR", str(home / "logs"))
    yield home
    # --debug raises the console level for the rest of the process
    set_console_level("WARNING")


@pytest.fixture(scope="session")
def testdata(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Directory holding the test files and their checksum.json."""
    directory = tmp_path_factory.mktemp("testdata")
    for filename, data in TEST_FILES.items():
        (directory / filename).write_bytes(data)
    write_checksum_sidecar(directory)
    return directory


@pytest.fixture(scope="session")
def expected_checksums(testdata: Path) -> dict[str, dict[str, str]]:
    """Reference checksums keyed by file name and display name."""
    return load_checksum_sidecar(testdata / "checksum.json")


@pytest.fixture
def hello_file(tmp_path: Path) -> Path:
    """File containing the five bytes of ``hello``."""
    path = tmp_path / "hello.txt"
    path.write_bytes(b"hello")
    return path
