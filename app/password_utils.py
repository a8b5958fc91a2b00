"""Password hash verification.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

from typing import Iterable

from passlib.context import CryptContext
from passlib.exc import UnknownHashError
from passlib.ifc import PasswordHash

DEFAULT_HASH_SCHEMES: tuple[str, ...] = ("postgres_md5", "bcrypt")


class PasswordUtils:
    """Verification primitive for pre-hashed credentials."""

    def __init__(self, schemes: Iterable[str] = DEFAULT_HASH_SCHEMES) -> None:
        """Initialize crypt context with supported schemes."""
        self.__crypt_context = CryptContext(schemes=list(schemes))

    def _get_handler(
        self,
        hashed_password: str,
        scheme: str | None,
    ) -> type[PasswordHash]:
        if scheme is None:
            handler = self.__crypt_context.identify(
                hashed_password,
                resolve=True,
            )
            if handler is None:
                raise UnknownHashError("hash could not be identified")
            return handler

        try:
            return self.__crypt_context.handler(scheme)
        except KeyError as err:
            raise UnknownHashError(f"unsupported scheme {scheme!r}") from err

    def verify_password(
        self,
        plain_password: str,
        hashed_password: str,
        scheme: str | None = None,
        user: str | None = None,
    ) -> bool:
        """Validate password.

        ``user`` is passed only to schemes salted with the user name,
        like ``postgres_md5``.

        :param str plain_password: raw password
        :param str hashed_password: pwd hash
        :param str | None scheme: passlib scheme, identified if None
        :param str | None user: role name
        :raises UnknownHashError: hash or scheme is not supported
        :return bool: is password verified
        """
        handler = self._get_handler(hashed_password, scheme)
        kwargs = {"user": user} if "user" in handler.context_kwds else {}
        return handler.verify(plain_password, hashed_password, **kwargs)
