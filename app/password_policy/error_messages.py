"""Error Messages for password policy checks.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .enums import ReasonCode


class ErrorMessages:
    """Error messages for password policy checks."""

    TOO_SHORT = "password is too short"
    CONTAINS_USERNAME = "password must not contain user name"

    MORE_DIGITS = "password must contain at least {count} numeric characters"
    MORE_SPECIAL = "password must contain at least {count} special characters"
    MORE_UPPERCASE = "password must contain at least {count} upper case letters"  # noqa: E501
    MORE_LOWERCASE = "password must contain at least {count} lower case letters"  # noqa: E501

    EASILY_CRACKED = "password is easily cracked"

    INCONSISTENT_THRESHOLDS = (
        "sum of minimum character requirements ({threshold_sum}) "
        "exceeds minimum password length ({min_length})"
    )


_TEMPLATES: dict[ReasonCode, str] = {
    ReasonCode.TOO_SHORT: ErrorMessages.TOO_SHORT,
    ReasonCode.CONTAINS_USERNAME: ErrorMessages.CONTAINS_USERNAME,
    ReasonCode.TOO_FEW_DIGITS: ErrorMessages.MORE_DIGITS,
    ReasonCode.TOO_FEW_SPECIAL: ErrorMessages.MORE_SPECIAL,
    ReasonCode.TOO_FEW_UPPERCASE: ErrorMessages.MORE_UPPERCASE,
    ReasonCode.TOO_FEW_LOWERCASE: ErrorMessages.MORE_LOWERCASE,
    ReasonCode.DICTIONARY_GUESSABLE: ErrorMessages.EASILY_CRACKED,
    ReasonCode.ENCRYPTED_PASSWORD_MATCHES_USERNAME: (
        ErrorMessages.CONTAINS_USERNAME
    ),
}


def render_message(reason: ReasonCode, threshold: int | None = None) -> str:
    """Render user-facing message for a reject reason.

    :param ReasonCode reason: reject reason
    :param int | None threshold: violated policy parameter, if any
    :return str: message
    """
    return _TEMPLATES[reason].format(count=threshold)
