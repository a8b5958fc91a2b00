"""Password Policy Validator.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import Callable, Self

from .classifier import as_bytes, classify
from .dataclasses import Accept, CharacterTally, PolicyConfig, Reject, Verdict
from .dictionary import DictionaryChecker
from .enums import ClassificationMode, ReasonCode


@dataclass(frozen=True)
class _Candidate:
    """Password under evaluation with its tally."""

    username: str | bytes
    password: str | bytes
    tally: CharacterTally


type _CheckType = Callable[[_Candidate], bool]


@dataclass
class _Checker:
    """Checker dataclass."""

    check: _CheckType
    reason: ReasonCode
    threshold: int | None = None


class PasswordPolicyValidator:
    """Builder for password policy rules.

    Checks run in the order they were added and the first failing one is
    the verdict. Use ``from_config`` for the standard chain.

    :Example:
        .. code-block:: python

            validator = PasswordPolicyValidator.from_config(PolicyConfig())
            assert validator.evaluate("alice", "Ab12!@Cd") == Accept()
            assert validator.evaluate("alice", "short1!") == Reject(
                ReasonCode.TOO_SHORT,
                8,
            )
    """  # fmt: skip

    _checkers: list[_Checker]
    _classification: ClassificationMode

    def __init__(
        self,
        classification: ClassificationMode = ClassificationMode.BYTES,
    ) -> None:
        """Initialize a new validator with no checks."""
        self._checkers = []
        self._classification = classification

    @classmethod
    def from_config(
        cls,
        config: PolicyConfig,
        dictionary: DictionaryChecker | None = None,
    ) -> Self:
        """Build the standard check chain for ``config``.

        :param PolicyConfig config: thresholds
        :param DictionaryChecker | None dictionary: consulted last, if set
        :return PasswordPolicyValidator: validator
        """
        validator = (
            cls(config.classification)
            .min_length(config.min_length)
            .not_contain_username()
            .min_digits(config.min_digits)
            .min_special(config.min_special_chars)
            .min_uppercase(config.min_uppercase)
            .min_lowercase(config.min_lowercase)
        )
        if dictionary is not None:
            validator.not_guessable(dictionary)

        return validator

    def __add_checker(
        self,
        check: _CheckType,
        reason: ReasonCode,
        threshold: int | None = None,
    ) -> None:
        self._checkers.append(
            _Checker(check=check, reason=reason, threshold=threshold),
        )

    def evaluate(
        self,
        username: str | bytes,
        password: str | bytes,
    ) -> Verdict:
        """Evaluate password against the configured checks.

        :param str | bytes username: role name, may be empty
        :param str | bytes password: plaintext candidate, may be empty
        :return Verdict: Accept or Reject of the first failed check
        """
        candidate = _Candidate(
            username=username,
            password=password,
            tally=classify(password, self._classification),
        )

        for checker in self._checkers:
            if not checker.check(candidate):
                return Reject(checker.reason, checker.threshold)

        return Accept()

    def min_length(self, length: int) -> Self:
        """Require minimum password length."""
        self.__add_checker(
            check=lambda c: c.tally.length >= length,
            reason=ReasonCode.TOO_SHORT,
            threshold=length,
        )
        return self

    def not_contain_username(self) -> Self:
        """Forbid the username as a contiguous, case-sensitive substring.

        An empty username is a substring of any password.
        """
        self.__add_checker(
            check=self._validate_not_contain_username,
            reason=ReasonCode.CONTAINS_USERNAME,
        )
        return self

    @staticmethod
    def _validate_not_contain_username(candidate: _Candidate) -> bool:
        return as_bytes(candidate.username) not in as_bytes(candidate.password)

    def min_digits(self, count: int) -> Self:
        """Require minimum count of digits."""
        self.__add_checker(
            check=lambda c: c.tally.digits >= count,
            reason=ReasonCode.TOO_FEW_DIGITS,
            threshold=count,
        )
        return self

    def min_special(self, count: int) -> Self:
        """Require minimum count of special characters.

        Special is anything that is neither a letter nor a digit.
        """
        self.__add_checker(
            check=lambda c: c.tally.special >= count,
            reason=ReasonCode.TOO_FEW_SPECIAL,
            threshold=count,
        )
        return self

    def min_uppercase(self, count: int) -> Self:
        """Require minimum count of uppercase letters."""
        self.__add_checker(
            check=lambda c: c.tally.uppercase >= count,
            reason=ReasonCode.TOO_FEW_UPPERCASE,
            threshold=count,
        )
        return self

    def min_lowercase(self, count: int) -> Self:
        """Require minimum count of lowercase letters."""
        self.__add_checker(
            check=lambda c: c.tally.lowercase >= count,
            reason=ReasonCode.TOO_FEW_LOWERCASE,
            threshold=count,
        )
        return self

    def not_guessable(self, dictionary: DictionaryChecker) -> Self:
        """Require the dictionary checker to not find the password."""
        self.__add_checker(
            check=lambda c: not dictionary.check(c.password),
            reason=ReasonCode.DICTIONARY_GUESSABLE,
        )
        return self


def evaluate(
    username: str | bytes,
    password: str | bytes,
    config: PolicyConfig,
    dictionary: DictionaryChecker | None = None,
) -> Verdict:
    """Evaluate a plaintext password with a fresh validator.

    Pure apart from the dictionary lookup; identical inputs give identical
    verdicts.
    """
    validator = PasswordPolicyValidator.from_config(config, dictionary)
    return validator.evaluate(username, password)
