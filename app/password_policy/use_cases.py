"""Password Policy Use Cases.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from loguru import logger

from password_utils import PasswordUtils

from .classifier import as_text
from .dataclasses import (
    Accept,
    Credential,
    OpaqueCredential,
    PlaintextCredential,
    PolicyConfig,
    Reject,
    Verdict,
)
from .dictionary import DictionaryChecker, get_dictionary_checker
from .enums import ReasonCode
from .exceptions import PasswordPolicyError
from .validator import PasswordPolicyValidator

if TYPE_CHECKING:
    from config import Settings

log = logger.bind(name="password_policy")


@dataclass(frozen=True)
class _PolicyState:
    """Everything one evaluation reads."""

    policy: PolicyConfig
    password_utils: PasswordUtils
    dictionary_checker: DictionaryChecker | None = None


class PasswordPolicyUseCases:
    """Password check entry point for the host system.

    Holds the active policy state: thresholds, hash verifier and
    dictionary checker. A reload swaps the whole state in one assignment,
    evaluations never see a partial update.
    """

    _state: _PolicyState

    def __init__(
        self,
        policy: PolicyConfig,
        password_utils: PasswordUtils,
        dictionary_checker: DictionaryChecker | None = None,
    ) -> None:
        """Initialize Password Policy Use Cases."""
        self._state = _PolicyState(policy, password_utils, dictionary_checker)

    @staticmethod
    def _state_from_settings(settings: "Settings") -> _PolicyState:
        return _PolicyState(
            policy=settings.policy_config(),
            password_utils=PasswordUtils(settings.HASH_SCHEMES),
            dictionary_checker=get_dictionary_checker(settings),
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> Self:
        """Build use cases from settings.

        :raises PasswordPolicyError: thresholds or wordlist are invalid
        :raises OSError: wordlist can not be read
        """
        state = cls._state_from_settings(settings)
        return cls(
            state.policy,
            state.password_utils,
            state.dictionary_checker,
        )

    @property
    def policy(self) -> PolicyConfig:
        """Get active policy snapshot."""
        return self._state.policy

    def reload(self, source: "PolicyConfig | Settings") -> PolicyConfig:
        """Replace active policy.

        A ``PolicyConfig`` replaces the thresholds only. ``Settings``
        also rebuild the hash verifier and the dictionary checker.

        :param PolicyConfig | Settings source: new configuration
        :raises PasswordPolicyError: new thresholds or wordlist are
            invalid, the active state stays in effect
        :raises OSError: wordlist can not be read, the active state stays
            in effect
        :return PolicyConfig: new active policy
        """
        try:
            if isinstance(source, PolicyConfig):
                state = _PolicyState(
                    source,
                    self._state.password_utils,
                    self._state.dictionary_checker,
                )
            else:
                state = self._state_from_settings(source)
        except (PasswordPolicyError, OSError) as err:
            log.warning(f"Password policy reload refused: {err}")
            raise

        self._state = state
        log.info(f"Password policy reloaded: {state.policy.as_dict()}")
        return state.policy

    def check_password(
        self,
        username: str | bytes,
        password: str | bytes,
    ) -> Verdict:
        """Check plaintext password against the active policy."""
        state = self._state
        validator = PasswordPolicyValidator.from_config(
            state.policy,
            state.dictionary_checker,
        )
        verdict = validator.evaluate(username, password)

        if isinstance(verdict, Reject):
            log.debug(
                f"Password rejected for {as_text(username)!r}: "
                f"{verdict.reason}",
            )

        return verdict

    def check_credential(
        self,
        username: str,
        credential: Credential,
    ) -> Verdict:
        """Check plaintext or pre-hashed credential.

        A hash can not be decomposed into characters, so only
        ``username`` used as the password is tried against it.
        """
        match credential:
            case PlaintextCredential(password=password):
                return self.check_password(username, password)
            case OpaqueCredential(hash=hashed, scheme=scheme):
                return self._check_opaque(username, hashed, scheme)

        raise TypeError(f"Unsupported credential {type(credential)!r}")

    def _check_opaque(
        self,
        username: str,
        hashed_password: str,
        scheme: str | None,
    ) -> Verdict:
        try:
            is_username = self._state.password_utils.verify_password(
                username,
                hashed_password,
                scheme=scheme,
                user=username,
            )
        except ValueError as err:  # UnknownHashError or malformed hash
            log.warning(
                f"Can not verify {scheme or 'unknown'} hash "
                f"for {username!r}: {err}",
            )
            return Accept()

        if is_username:
            log.debug(f"Password hash matches user name {username!r}")
            return Reject(ReasonCode.ENCRYPTED_PASSWORD_MATCHES_USERNAME)

        return Accept()

    @staticmethod
    def get_error_message(verdict: Verdict) -> str | None:
        """Get user-facing message, None for accepted passwords."""
        return verdict.message
