"""Password policy enums.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from enum import StrEnum


class ReasonCode(StrEnum):
    """Reason of a rejected password."""

    TOO_SHORT = "TooShort"
    CONTAINS_USERNAME = "ContainsUsername"
    TOO_FEW_DIGITS = "TooFewDigits"
    TOO_FEW_SPECIAL = "TooFewSpecial"
    TOO_FEW_UPPERCASE = "TooFewUppercase"
    TOO_FEW_LOWERCASE = "TooFewLowercase"
    DICTIONARY_GUESSABLE = "DictionaryGuessable"
    ENCRYPTED_PASSWORD_MATCHES_USERNAME = "EncryptedPasswordMatchesUsername"


class ClassificationMode(StrEnum):
    """How password characters are split into classes.

    BYTES classifies every UTF-8 byte with ASCII ctype rules, so each byte
    of a multi-byte character is a special character. UNICODE classifies
    code points with ``str`` predicates.
    """

    BYTES = "bytes"
    UNICODE = "unicode"
