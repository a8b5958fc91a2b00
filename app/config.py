"""Module with settings.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import os
from pathlib import Path
from typing import ClassVar, Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from password_policy.constants import (
    DEFAULT_MIN_DIGITS,
    DEFAULT_MIN_LENGTH,
    DEFAULT_MIN_LOWERCASE,
    DEFAULT_MIN_SPECIAL_CHARS,
    DEFAULT_MIN_UPPERCASE,
)
from password_policy.dataclasses import PolicyConfig
from password_policy.enums import ClassificationMode
from password_utils import DEFAULT_HASH_SCHEMES


class Settings(BaseModel):
    """Password policy settings.

    Every field is read from the environment variable named
    ``P_POLICY_<FIELD>``, see ``from_os``.
    """

    model_config = ConfigDict(frozen=True)

    ENV_PREFIX: ClassVar[str] = "P_POLICY_"

    # Ranges are checked by PolicyConfig
    MIN_PASSWORD_LEN: int = DEFAULT_MIN_LENGTH
    MIN_SPECIAL_CHARS: int = DEFAULT_MIN_SPECIAL_CHARS
    MIN_NUMBERS: int = DEFAULT_MIN_DIGITS
    MIN_UPPERCASE_LETTER: int = DEFAULT_MIN_UPPERCASE
    MIN_LOWERCASE_LETTER: int = DEFAULT_MIN_LOWERCASE

    CLASSIFICATION: ClassificationMode = ClassificationMode.BYTES

    DICTIONARY_PATH: Path | None = None
    DICTIONARY_EXACT_MATCH: bool = True
    ZXCVBN_MIN_SCORE: int | None = Field(None, ge=0, le=4)

    HASH_SCHEMES: tuple[str, ...] = DEFAULT_HASH_SCHEMES

    LOG_LEVEL: Literal[
        "TRACE",
        "DEBUG",
        "INFO",
        "SUCCESS",
        "WARNING",
        "ERROR",
        "CRITICAL",
    ] = "INFO"
    LOG_FILE: Path | None = None

    @field_validator("HASH_SCHEMES", mode="before")
    def split_schemes(cls, value: str | tuple[str, ...]) -> tuple[str, ...]:  # noqa: N805
        """Get schemes from a comma separated string."""
        if isinstance(value, str):
            return tuple(v.strip() for v in value.split(",") if v.strip())
        return value

    @field_validator("LOG_LEVEL", mode="before")
    def upper_log_level(cls, value: object) -> object:  # noqa: N805
        """Accept level names in any case."""
        if isinstance(value, str):
            return value.upper()
        return value

    @field_validator("DICTIONARY_PATH", "ZXCVBN_MIN_SCORE", "LOG_FILE", mode="before")  # noqa: E501
    def empty_as_none(cls, value: object) -> object:  # noqa: N805
        """Treat empty environment values as unset."""
        if value == "":
            return None
        return value

    def policy_config(self) -> PolicyConfig:
        """Build policy snapshot.

        :raises InconsistentThresholdsError: a threshold is out of range or
            thresholds do not fit together
        :return PolicyConfig: validated thresholds
        """
        return PolicyConfig(
            min_length=self.MIN_PASSWORD_LEN,
            min_special_chars=self.MIN_SPECIAL_CHARS,
            min_digits=self.MIN_NUMBERS,
            min_uppercase=self.MIN_UPPERCASE_LETTER,
            min_lowercase=self.MIN_LOWERCASE_LETTER,
            classification=self.CLASSIFICATION,
        )

    @classmethod
    def from_os(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Get cls from environ."""
        environ = os.environ if environ is None else environ
        return cls(
            **{
                key.removeprefix(cls.ENV_PREFIX): value
                for key, value in environ.items()
                if key.startswith(cls.ENV_PREFIX)
                and key.removeprefix(cls.ENV_PREFIX) in cls.model_fields
            },
        )
