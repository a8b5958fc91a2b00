"""Dictionary checkers.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Protocol, Self, runtime_checkable

from loguru import logger
from zxcvbn import zxcvbn

from .classifier import as_text
from .constants import (
    DEFAULT_ZXCVBN_MIN_SCORE,
    MAX_BANWORD_LENGTH,
    MIN_LENGTH_FOR_CONTAINMENT,
    ZXCVBN_MAX_PASSWORD_LENGTH,
)
from .exceptions import PasswordBanWordTooLongError

if TYPE_CHECKING:
    from config import Settings

log = logger.bind(name="password_policy")


@runtime_checkable
class DictionaryChecker(Protocol):
    """Protocol for dictionary-guessability lookups.

    Called only after every structural check passed. Timeouts and
    cancellation are up to the implementation.
    """

    def check(self, password: str | bytes) -> bool:
        """Return True if the password is guessable."""
        ...


class WordlistDictionaryChecker:
    """Case-insensitive ban word list.

    With ``is_exact_match`` a password is guessable when it equals a word,
    otherwise when it contains any word of at least
    ``MIN_LENGTH_FOR_CONTAINMENT`` characters.
    """

    def __init__(
        self,
        words: Iterable[str],
        is_exact_match: bool = True,
    ) -> None:
        """Load ban words.

        :raises PasswordBanWordTooLongError: a word is longer than
            ``MAX_BANWORD_LENGTH``
        """
        self._is_exact_match = is_exact_match
        self._words: frozenset[str] = frozenset(self._normalize(words))

    @staticmethod
    def _normalize(words: Iterable[str]) -> Iterable[str]:
        for word in words:
            word = word.strip().lower()
            if not word:
                continue

            if len(word) > MAX_BANWORD_LENGTH:
                raise PasswordBanWordTooLongError(
                    f"Ban word is longer than {MAX_BANWORD_LENGTH} characters",
                )

            yield word

    @classmethod
    def from_file(cls, path: str | Path, is_exact_match: bool = True) -> Self:
        """Read one word per line, blank lines and ``#`` comments skipped."""
        with open(path, encoding="utf-8", errors="replace") as file:
            words = [
                line for line in file if not line.lstrip().startswith("#")
            ]

        checker = cls(words, is_exact_match=is_exact_match)
        log.info(f"Loaded {len(checker)} ban words from {path}")
        return checker

    def __len__(self) -> int:
        return len(self._words)

    def check(self, password: str | bytes) -> bool:
        """Check password against ban words."""
        pwd = as_text(password).lower()

        if pwd in self._words:
            return True

        if self._is_exact_match:
            return False

        return any(
            word in pwd
            for word in self._words
            if len(word) >= MIN_LENGTH_FOR_CONTAINMENT
        )


class ZxcvbnDictionaryChecker:
    """Guessability estimate by zxcvbn score."""

    def __init__(self, min_score: int = DEFAULT_ZXCVBN_MIN_SCORE) -> None:
        """Set minimal acceptable score, 0 to 4."""
        self._min_score = min_score

    def check(self, password: str | bytes) -> bool:
        """Check if password scores below the minimum."""
        pwd = as_text(password)[:ZXCVBN_MAX_PASSWORD_LENGTH]
        strength_report = zxcvbn(pwd, max_length=ZXCVBN_MAX_PASSWORD_LENGTH)
        return strength_report["score"] < self._min_score


def get_dictionary_checker(settings: "Settings") -> DictionaryChecker | None:
    """Get dictionary checker configured in settings.

    A wordlist wins over zxcvbn when both are set.

    :raises PasswordBanWordTooLongError: a word in the list is too long
    :raises OSError: wordlist can not be read
    """
    if settings.DICTIONARY_PATH is not None:
        return WordlistDictionaryChecker.from_file(
            settings.DICTIONARY_PATH,
            is_exact_match=settings.DICTIONARY_EXACT_MATCH,
        )

    if settings.ZXCVBN_MIN_SCORE is not None:
        return ZxcvbnDictionaryChecker(settings.ZXCVBN_MIN_SCORE)

    return None
