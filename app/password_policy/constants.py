"""Password policy constants file."""

from string import ascii_lowercase, ascii_uppercase, digits
from typing import Literal

DEFAULT_MIN_LENGTH: Literal[8] = 8
DEFAULT_MIN_SPECIAL_CHARS: Literal[2] = 2
DEFAULT_MIN_DIGITS: Literal[2] = 2
DEFAULT_MIN_UPPERCASE: Literal[2] = 2
DEFAULT_MIN_LOWERCASE: Literal[2] = 2

# C-locale ctype classes, byte values
ASCII_UPPERCASE_BYTES: frozenset[int] = frozenset(ascii_uppercase.encode())
ASCII_LOWERCASE_BYTES: frozenset[int] = frozenset(ascii_lowercase.encode())
ASCII_DIGIT_BYTES: frozenset[int] = frozenset(digits.encode())

TEXT_ENCODING: Literal["utf-8"] = "utf-8"

MIN_LENGTH_FOR_CONTAINMENT: Literal[3] = 3
MAX_BANWORD_LENGTH: Literal[254] = 254

ZXCVBN_MAX_PASSWORD_LENGTH: Literal[72] = 72
DEFAULT_ZXCVBN_MIN_SCORE: Literal[3] = 3
