"""Password policy data classes.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass, field, fields, replace
from typing import Any, Literal, Self

from .constants import (
    DEFAULT_MIN_DIGITS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_MIN_LOWERCASE,
    DEFAULT_MIN_SPECIAL_CHARS,
    DEFAULT_MIN_UPPERCASE,
)
from .enums import ClassificationMode, ReasonCode
from .error_messages import ErrorMessages, render_message
from .exceptions import InconsistentThresholdsError

_SUB_MINIMUMS: tuple[str, ...] = (
    "min_special_chars",
    "min_digits",
    "min_uppercase",
    "min_lowercase",
)


@dataclass(frozen=True)
class PolicyConfig:
    """Composition thresholds of the password policy.

    Immutable snapshot: a changed threshold means a new instance, and every
    new instance is validated in ``__post_init__``.

    :raises InconsistentThresholdsError: a threshold is not an integer,
        is out of range, or the sum of the sub-minimums exceeds
        ``min_length``.
    """

    min_length: int = DEFAULT_MIN_LENGTH
    min_special_chars: int = DEFAULT_MIN_SPECIAL_CHARS
    min_digits: int = DEFAULT_MIN_DIGITS
    min_uppercase: int = DEFAULT_MIN_UPPERCASE
    min_lowercase: int = DEFAULT_MIN_LOWERCASE
    classification: ClassificationMode = ClassificationMode.BYTES

    def __post_init__(self) -> None:
        """Validate thresholds."""
        self._check_range("min_length", lower_bound=1)
        for name in _SUB_MINIMUMS:
            self._check_range(name, lower_bound=0)

        if self.threshold_sum > self.min_length:
            raise InconsistentThresholdsError(
                ErrorMessages.INCONSISTENT_THRESHOLDS.format(
                    threshold_sum=self.threshold_sum,
                    min_length=self.min_length,
                ),
                min_length=self.min_length,
                threshold_sum=self.threshold_sum,
            )

        try:
            classification = ClassificationMode(self.classification)
        except ValueError as err:
            raise InconsistentThresholdsError(
                f"unknown classification mode {self.classification!r}",
                field="classification",
            ) from err

        # str values from config files are accepted
        object.__setattr__(self, "classification", classification)

    def _check_range(self, name: str, lower_bound: int) -> None:
        value = getattr(self, name)
        if isinstance(value, bool) or not isinstance(value, int):
            raise InconsistentThresholdsError(
                f"{name} must be an integer, got {value!r}",
                field=name,
            )

        if value < lower_bound:
            raise InconsistentThresholdsError(
                f"{name} must be greater than or equal to {lower_bound}, "
                f"got {value}",
                field=name,
            )

    @property
    def threshold_sum(self) -> int:
        """Sum of all per-class minimums."""
        return sum(getattr(self, name) for name in _SUB_MINIMUMS)

    @classmethod
    def construct(
        cls,
        min_length: int,
        min_special: int,
        min_digits: int,
        min_upper: int,
        min_lower: int,
        classification: ClassificationMode = ClassificationMode.BYTES,
    ) -> Self:
        """Build validated policy config from positional thresholds."""
        return cls(
            min_length=min_length,
            min_special_chars=min_special,
            min_digits=min_digits,
            min_uppercase=min_upper,
            min_lowercase=min_lower,
            classification=classification,
        )

    @classmethod
    def default(cls) -> Self:
        """Get process-wide default snapshot."""
        return cls()

    def replace(self, **changes: Any) -> Self:
        """Get new validated snapshot with ``changes`` applied."""
        return replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Get thresholds as a plain dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class CharacterTally:
    """Per-class character counts of one password."""

    length: int = 0
    letters: int = 0
    digits: int = 0
    special: int = 0
    uppercase: int = 0
    lowercase: int = 0

    @property
    def caseless_letters(self) -> int:
        """Letters that are neither upper nor lower case."""
        return self.letters - self.uppercase - self.lowercase


@dataclass(frozen=True)
class Accept:
    """Password passed every check."""

    accepted: Literal[True] = field(default=True, init=False)

    @property
    def message(self) -> None:
        """Accepted passwords carry no message."""
        return None


@dataclass(frozen=True)
class Reject:
    """Password failed a check.

    ``threshold`` is the policy parameter that was violated, ``None`` when
    the failed check has no numeric parameter.
    """

    reason: ReasonCode
    threshold: int | None = None
    accepted: Literal[False] = field(default=False, init=False)

    @property
    def message(self) -> str:
        """User-facing message."""
        return render_message(self.reason, self.threshold)


type Verdict = Accept | Reject


@dataclass(frozen=True)
class PlaintextCredential:
    """Password as typed by the user."""

    password: str | bytes = field(repr=False)


@dataclass(frozen=True)
class OpaqueCredential:
    """Pre-hashed password.

    ``scheme`` is a passlib scheme name, ``None`` to identify it by hash.
    """

    hash: str = field(repr=False)
    scheme: str | None = None


type Credential = PlaintextCredential | OpaqueCredential
