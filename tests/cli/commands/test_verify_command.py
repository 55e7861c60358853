"""Tests for the verify command."""

import pytest

from hash1.cli.runner import CLIRunner
from hash1.config import GlobalConfigManager
from tests.checksum_data import HELLO_SHA256

HELLO_MD5 = "5d41402abc4b2a76b9719d911017c592"


@pytest.fixture
def runner(tmp_path) -> CLIRunner:
    """Runner with default settings."""
    return CLIRunner(GlobalConfigManager(tmp_path / "config"))


def test_ok(runner, capsys, hello_file):
    assert runner.run(["verify", "-s", HELLO_SHA256, str(hello_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == "OK\n"
    assert captured.err == ""


def test_prefix_and_suffix(runner, capsys, hello_file):
    code = runner.run(
        ["verify", "--sha256", "0x2CF24D...938B9824", "-m", "5d41", str(hello_file)]
    )
    assert code == 0
    assert capsys.readouterr().out == "OK\n"


def test_match_anything(runner, capsys, hello_file):
    code = runner.run(["verify", "--blake2b-512", "...", str(hello_file)])
    assert code == 0
    assert capsys.readouterr().out == "OK\n"


def test_fail_lists_mismatches(runner, capsys, hello_file):
    code = runner.run(
        ["verify", "-m", "5d41", "-s", "ffff", "--sha1", "00", str(hello_file)]
    )
    assert code == 3
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "FAIL"
    assert lines[1].startswith("SHA-1: ")
    assert lines[2] == f"SHA-256: {HELLO_SHA256}"
    assert len(lines) == 3


def test_fail_uses_uppercase_setting(tmp_path, capsys, hello_file):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "settings.conf").write_text(
        "[output]\nuppercase = true\n", encoding="utf-8"
    )
    runner = CLIRunner(GlobalConfigManager(config_dir))

    assert runner.run(["verify", "-m", "00", str(hello_file)]) == 3
    assert capsys.readouterr().out == f"FAIL\nMD5: {HELLO_MD5.upper()}\n"


def test_silent_ok(runner, capsys, hello_file):
    assert runner.run(["verify", "-S", "-s", "2cf", str(hello_file)]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_silent_fail(runner, capsys, hello_file):
    assert runner.run(["verify", "-S", "-s", "00", str(hello_file)]) == 3
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_silent_hides_file_errors(runner, capsys, tmp_path):
    code = runner.run(["verify", "-S", "-s", "00", str(tmp_path / "missing")])
    assert code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_silent_still_reports_illegal_use(runner, capsys, hello_file):
    assert runner.run(["verify", "-S", str(hello_file)]) == 1
    assert "hash checksum not specified" in capsys.readouterr().err


def test_no_checksum(runner, capsys, hello_file):
    assert runner.run(["verify", str(hello_file)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Error: Invalid usage: hash checksum not specified\n"


def test_invalid_prefix(runner, capsys, hello_file):
    assert runner.run(["verify", "-s", "3x12", str(hello_file)]) == 1
    assert capsys.readouterr().err == (
        "Error: Invalid checksum for 'SHA-256': hash checksum prefix "
        "'3x12' is not a valid hexadecimal representation\n"
    )


def test_invalid_suffix(runner, capsys, hello_file):
    assert runner.run(["verify", "--sha3-256", "12...3x", str(hello_file)]) == 1
    err = capsys.readouterr().err
    assert "for 'SHA3-256'" in err
    assert "suffix '3x'" in err


def test_missing_file(runner, capsys, tmp_path):
    code = runner.run(["verify", "-s", "00", str(tmp_path / "missing")])
    assert code == 1
    assert "Error: File not found" in capsys.readouterr().err


def test_directory(runner, capsys, tmp_path):
    assert runner.run(["verify", "-s", "00", str(tmp_path)]) == 1
    assert "Error: Is a directory" in capsys.readouterr().err


def test_debug_traceback(runner, capsys, tmp_path):
    code = runner.run(
        ["--debug", "verify", "-s", "00", str(tmp_path / "missing")]
    )
    assert code == 1
    assert "Traceback" in capsys.readouterr().err


def test_no_file_prints_help(runner, capsys):
    assert runner.run(["verify", "-s", "00"]) == 0
    assert "usage: hash1 verify" in capsys.readouterr().out
