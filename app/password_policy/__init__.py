"""Password composition policy module.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from .dataclasses import (
    Accept,
    CharacterTally,
    Credential,
    OpaqueCredential,
    PlaintextCredential,
    PolicyConfig,
    Reject,
    Verdict,
)
from .dictionary import (
    DictionaryChecker,
    WordlistDictionaryChecker,
    ZxcvbnDictionaryChecker,
)
from .enums import ClassificationMode, ReasonCode
from .exceptions import InconsistentThresholdsError, PasswordPolicyError
from .use_cases import PasswordPolicyUseCases
from .validator import PasswordPolicyValidator, evaluate

__all__ = [
    "Accept",
    "CharacterTally",
    "ClassificationMode",
    "Credential",
    "DictionaryChecker",
    "InconsistentThresholdsError",
    "OpaqueCredential",
    "PasswordPolicyError",
    "PasswordPolicyUseCases",
    "PasswordPolicyValidator",
    "PlaintextCredential",
    "PolicyConfig",
    "ReasonCode",
    "Reject",
    "Verdict",
    "WordlistDictionaryChecker",
    "ZxcvbnDictionaryChecker",
    "evaluate",
]
