"""Password policy exceptions module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import IntEnum, unique


@unique
class ErrorCodes(IntEnum):
    """Error codes."""

    BASE_ERROR = 0
    INCONSISTENT_THRESHOLDS_ERROR = 1

    PASSWORD_BAN_WORD_ERROR = 8
    PASSWORD_BAN_WORD_TOO_LONG_ERROR = 10


class PasswordPolicyError(Exception):
    """Base exception class for password policy errors."""

    code: ErrorCodes = ErrorCodes.BASE_ERROR

    def __init_subclass__(cls) -> None:
        """Require every subclass to declare its own code."""
        super().__init_subclass__()

        if "code" not in cls.__dict__:
            raise AttributeError(f"{cls.__name__}: code must be set")


class InconsistentThresholdsError(PasswordPolicyError):
    """Thresholds can not be satisfied together or are out of range.

    Raised only while a policy configuration is built or reloaded.
    """

    code = ErrorCodes.INCONSISTENT_THRESHOLDS_ERROR

    def __init__(
        self,
        message: str,
        *,
        min_length: int | None = None,
        threshold_sum: int | None = None,
        field: str | None = None,
    ) -> None:
        """Keep the offending values next to the message."""
        super().__init__(message)
        self.min_length = min_length
        self.threshold_sum = threshold_sum
        self.field = field


class PasswordBanWordError(PasswordPolicyError):
    """Base exception class for ban word list errors."""

    code = ErrorCodes.PASSWORD_BAN_WORD_ERROR


class PasswordBanWordTooLongError(PasswordBanWordError):
    """Exception raised when a ban word too long."""

    code = ErrorCodes.PASSWORD_BAN_WORD_TOO_LONG_ERROR
