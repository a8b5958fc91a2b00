"""Test password check command line.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import hashlib
import io
from pathlib import Path
from typing import Iterator

import pytest
from loguru import logger

from password_policy.__main__ import (
    EXIT_ACCEPTED,
    EXIT_CONFIG_ERROR,
    EXIT_REJECTED,
    main,
)


@pytest.fixture(autouse=True)
def reset_logger() -> Iterator[None]:
    """Drop sinks added by the command."""
    yield
    logger.remove()


def _stdin(monkeypatch: pytest.MonkeyPatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_accepted(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
) -> None:
    """Test accepted password exit code."""
    _stdin(monkeypatch, "Ab12!@Cd\n")

    assert main(["-u", "alice", "--password-stdin"]) == EXIT_ACCEPTED
    assert capsys.readouterr().out == "accepted\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["--password-stdin"],
        ["-u", "", "--password-stdin"],
        ["--hash", "opaque"],
    ],
)
def test_username_required(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
    argv: list[str],
) -> None:
    """Test password check without user name is refused."""
    _stdin(monkeypatch, "Ab12!@Cd\n")

    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == EXIT_CONFIG_ERROR
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "-u/--username is required" in captured.err


def test_rejected(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
) -> None:
    """Test rejected password prints the message."""
    _stdin(monkeypatch, "Abcdefg1!\n")

    assert main(["-u", "alice", "--password-stdin"]) == EXIT_REJECTED
    assert capsys.readouterr().out == (
        "password must contain at least 2 numeric characters\n"
    )


def test_policy_from_environment(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
) -> None:
    """Test thresholds are read from environment."""
    monkeypatch.setenv("P_POLICY_MIN_PASSWORD_LEN", "12")
    _stdin(monkeypatch, "Ab12!@Cd\n")

    assert main(["-u", "alice", "--password-stdin"]) == EXIT_REJECTED
    assert capsys.readouterr().out == "password is too short\n"


def test_hash_matches_username(capsys: pytest.CaptureFixture) -> None:
    """Test pre-hashed password equal to user name."""
    hashed = "md5" + hashlib.md5(b"bobbob").hexdigest()  # noqa: S324

    assert main(["-u", "bob", "--hash", hashed]) == EXIT_REJECTED
    assert capsys.readouterr().out == "password must not contain user name\n"


def test_unknown_hash_accepted(capsys: pytest.CaptureFixture) -> None:
    """Test unverifiable hash passes."""
    assert main(["-u", "bob", "--hash", "opaque"]) == EXIT_ACCEPTED
    assert capsys.readouterr().out == "accepted\n"


def test_check_config(capsys: pytest.CaptureFixture) -> None:
    """Test configuration check."""
    assert main(["--check-config"]) == EXIT_ACCEPTED
    assert capsys.readouterr().out.startswith("configuration ok:")


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("P_POLICY_MIN_PASSWORD_LEN", "4"),
        ("P_POLICY_MIN_NUMBERS", "-1"),
        ("P_POLICY_CLASSIFICATION", "ascii"),
        ("P_POLICY_DICTIONARY_PATH", "/nonexistent/words.txt"),
    ],
)
def test_config_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture,
    name: str,
    value: str,
) -> None:
    """Test invalid configuration exit code."""
    monkeypatch.setenv(name, value)

    assert main(["--check-config"]) == EXIT_CONFIG_ERROR
    assert "configuration error:" in capsys.readouterr().err


def test_log_file(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    """Test file sink receives policy records."""
    log_file = tmp_path / "policy.log"
    monkeypatch.setenv("P_POLICY_LOG_FILE", str(log_file))

    assert main(["--check-config"]) == EXIT_ACCEPTED
    logger.remove()

    assert "Password policy loaded" in log_file.read_text()
