"""Test main config.

Copyright (c) 2024 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from pathlib import Path
from typing import Callable, Iterator

import pytest
from dishka import Container, make_container
from passlib.context import CryptContext

from config import Settings
from ioc import MainProvider
from password_policy.dataclasses import PolicyConfig
from password_policy.use_cases import PasswordPolicyUseCases
from password_utils import PasswordUtils


@pytest.fixture
def settings() -> Settings:
    """Get default settings."""
    return Settings()


@pytest.fixture
def container(settings: Settings) -> Iterator[Container]:
    """Create test container."""
    ctnr = make_container(MainProvider(), context={Settings: settings})
    yield ctnr
    ctnr.close()


@pytest.fixture
def password_use_cases(container: Container) -> PasswordPolicyUseCases:
    """Get password policy use cases."""
    return container.get(PasswordPolicyUseCases)


@pytest.fixture
def policy(password_use_cases: PasswordPolicyUseCases) -> PolicyConfig:
    """Get active policy snapshot."""
    return password_use_cases.policy


@pytest.fixture
def password_utils(settings: Settings) -> PasswordUtils:
    """Get hash verification primitive."""
    return PasswordUtils(settings.HASH_SCHEMES)


@pytest.fixture
def get_password_hash(
    settings: Settings,
) -> Callable[..., str]:
    """Get hashing function for the configured schemes."""
    crypt_context = CryptContext(schemes=list(settings.HASH_SCHEMES))

    def _hash(password: str, scheme: str, user: str | None = None) -> str:
        handler = crypt_context.handler(scheme)
        kwargs = {"user": user} if "user" in handler.context_kwds else {}
        return handler.hash(password, **kwargs)

    return _hash


@pytest.fixture
def wordlist_path(tmp_path: Path) -> Path:
    """Write a small ban word list."""
    path = tmp_path / "words.txt"
    path.write_text(
        "# common passwords\n"
        "password\n"
        "  # indented note\n"
        "\n"
        "Qwerty\n"
        "dragon\n",
        encoding="utf-8",
    )
    return path
