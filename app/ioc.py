"""DI Provider password policy module.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from dishka import Provider, Scope, from_context, provide
from loguru import logger

from config import Settings
from password_policy.use_cases import PasswordPolicyUseCases

log = logger.bind(name="password_policy")


class MainProvider(Provider):
    """Provider for password policy checks."""

    scope = Scope.APP
    settings = from_context(provides=Settings, scope=Scope.APP)

    @provide(scope=Scope.APP)
    def get_password_policy_use_cases(
        self,
        settings: Settings,
    ) -> PasswordPolicyUseCases:
        """Get use cases holding the policy, hash verifier and dictionary.

        The policy itself is not provided separately, read it from
        ``PasswordPolicyUseCases.policy`` so reloads are seen.
        """
        use_cases = PasswordPolicyUseCases.from_settings(settings)
        log.info(f"Password policy loaded: {use_cases.policy.as_dict()}")
        return use_cases
