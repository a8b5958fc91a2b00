"""Password character classification.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .constants import (
    ASCII_DIGIT_BYTES,
    ASCII_LOWERCASE_BYTES,
    ASCII_UPPERCASE_BYTES,
    TEXT_ENCODING,
)
from .dataclasses import CharacterTally
from .enums import ClassificationMode


def as_bytes(value: str | bytes) -> bytes:
    """Encode text the way it reaches a C string, bytes as is."""
    if isinstance(value, bytes):
        return value
    return value.encode(TEXT_ENCODING, errors="surrogatepass")


def as_text(value: str | bytes) -> str:
    """Decode bytes without failing on invalid sequences, text as is."""
    if isinstance(value, str):
        return value
    return value.decode(TEXT_ENCODING, errors="surrogateescape")


def classify(
    password: str | bytes,
    mode: ClassificationMode = ClassificationMode.BYTES,
) -> CharacterTally:
    """Count password characters per class in one left-to-right pass.

    Every unit lands in exactly one of letter, digit or special. Letters
    are further split into upper and lower case; a caseless letter counts
    as a letter only.

    :param str | bytes password: candidate password
    :param ClassificationMode mode: byte-wise ASCII rules or code points
    :return CharacterTally: counts
    """
    if mode == ClassificationMode.BYTES:
        return _classify_bytes(as_bytes(password))
    return _classify_text(as_text(password))


def _classify_bytes(password: bytes) -> CharacterTally:
    letters = digits = special = uppercase = lowercase = 0

    for byte in password:
        if byte in ASCII_UPPERCASE_BYTES:
            letters += 1
            uppercase += 1
        elif byte in ASCII_LOWERCASE_BYTES:
            letters += 1
            lowercase += 1
        elif byte in ASCII_DIGIT_BYTES:
            digits += 1
        else:
            special += 1

    return CharacterTally(
        length=len(password),
        letters=letters,
        digits=digits,
        special=special,
        uppercase=uppercase,
        lowercase=lowercase,
    )


def _classify_text(password: str) -> CharacterTally:
    letters = digits = special = uppercase = lowercase = 0

    for char in password:
        if char.isalpha():
            letters += 1
            if char.isupper():
                uppercase += 1
            elif char.islower():
                lowercase += 1
        elif char.isdecimal():
            digits += 1
        else:
            special += 1

    return CharacterTally(
        length=len(password),
        letters=letters,
        digits=digits,
        special=special,
        uppercase=uppercase,
        lowercase=lowercase,
    )
