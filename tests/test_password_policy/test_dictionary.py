"""Test dictionary checkers.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path

import pytest

from password_policy.dictionary import (
    DictionaryChecker,
    WordlistDictionaryChecker,
    ZxcvbnDictionaryChecker,
)
from password_policy.exceptions import (
    ErrorCodes,
    PasswordBanWordTooLongError,
)


def test_wordlist_exact_match() -> None:
    """Test exact match is case insensitive."""
    checker = WordlistDictionaryChecker(["Password", " dragon "])

    assert checker.check("password")
    assert checker.check("PASSWORD")
    assert checker.check(b"Dragon")
    assert not checker.check("password1")
    assert not checker.check("Ab12!@Cd")


def test_wordlist_containment() -> None:
    """Test containment mode ignores too short words."""
    checker = WordlistDictionaryChecker(
        ["password", "ab"],
        is_exact_match=False,
    )

    assert checker.check("MyPassword12!@")
    assert checker.check("ab")
    assert not checker.check("xxAB12!@cd")


def test_wordlist_from_file(wordlist_path: Path) -> None:
    """Test comments and blank lines are skipped."""
    checker = WordlistDictionaryChecker.from_file(wordlist_path)

    assert len(checker) == 3
    assert checker.check("qwerty")
    assert not checker.check("# common passwords")
    assert not checker.check("# indented note")


def test_wordlist_from_file_containment(wordlist_path: Path) -> None:
    """Test file based list in containment mode."""
    checker = WordlistDictionaryChecker.from_file(
        wordlist_path,
        is_exact_match=False,
    )

    assert checker.check("Dragon12!@xy")
    assert not checker.check("Drag0n12!@xy")


def test_wordlist_too_long_word() -> None:
    """Test ban word length limit."""
    with pytest.raises(PasswordBanWordTooLongError) as exc_info:
        WordlistDictionaryChecker(["a" * 255])

    assert exc_info.value.code == ErrorCodes.PASSWORD_BAN_WORD_TOO_LONG_ERROR

    assert len(WordlistDictionaryChecker(["a" * 254])) == 1


def test_zxcvbn_checker() -> None:
    """Test zxcvbn score threshold."""
    checker = ZxcvbnDictionaryChecker(min_score=3)

    assert checker.check("password")
    assert not checker.check("Xk9#mQ2$vL7!pR4&")


def test_zxcvbn_zero_score_never_guessable() -> None:
    """Test minimal score of zero accepts every password."""
    assert not ZxcvbnDictionaryChecker(min_score=0).check("password")


def test_zxcvbn_long_password() -> None:
    """Test password longer than zxcvbn limit is truncated."""
    assert not ZxcvbnDictionaryChecker().check("Xk9#mQ2$vL7!pR4&" * 10)


@pytest.mark.parametrize(
    "checker",
    [WordlistDictionaryChecker([]), ZxcvbnDictionaryChecker()],
)
def test_checkers_follow_protocol(checker: DictionaryChecker) -> None:
    """Test implementations satisfy the checker protocol."""
    assert isinstance(checker, DictionaryChecker)
