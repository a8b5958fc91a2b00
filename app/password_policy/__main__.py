"""Check a password from the command line.

Copyright (c) 2025 MultiFactor
License: https://github.com/MultiDirectoryLab/MultiDirectory/blob/main/LICENSE
"""

import argparse
import sys
from getpass import getpass
from typing import Sequence

from dishka import make_container
from loguru import logger
from pydantic import ValidationError

from config import Settings
from ioc import MainProvider
from password_policy.dataclasses import (
    Credential,
    OpaqueCredential,
    PlaintextCredential,
)
from password_policy.exceptions import PasswordPolicyError
from password_policy.use_cases import PasswordPolicyUseCases

EXIT_ACCEPTED = 0
EXIT_REJECTED = 1
EXIT_CONFIG_ERROR = 2


def setup_logging(settings: Settings) -> None:
    """Configure loguru sinks."""
    logger.remove()
    logger.add(sys.stderr, level=settings.LOG_LEVEL)

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            level=settings.LOG_LEVEL,
            filter=lambda rec: rec["extra"].get("name") == "password_policy",
            retention="10 days",
            rotation="1d",
            colorize=False,
        )


def _read_credential(args: argparse.Namespace) -> Credential:
    if args.hash is not None:
        return OpaqueCredential(hash=args.hash, scheme=args.scheme)

    if args.password_stdin:
        return PlaintextCredential(sys.stdin.readline().rstrip("\r\n"))

    return PlaintextCredential(getpass("Password: "))


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m password_policy",
        description="Check password against the composition policy",
    )
    parser.add_argument("-u", "--username", help="Role name")
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--password-stdin",
        action="store_true",
        help="Read plaintext password from the first line of stdin",
    )
    group.add_argument("--hash", help="Check pre-hashed password")
    group.add_argument(
        "--check-config",
        action="store_true",
        help="Only validate policy settings",
    )
    parser.add_argument(
        "--scheme",
        help="Passlib scheme of --hash, identified if omitted",
    )
    args = parser.parse_args(argv)

    # empty user name is contained in every password
    if not args.check_config and not args.username:
        parser.error("-u/--username is required to check a password")

    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run password check."""
    args = _parse_args(argv)

    try:
        settings = Settings.from_os()
    except ValidationError as err:
        print(f"configuration error: {err}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    setup_logging(settings)

    container = make_container(MainProvider(), context={Settings: settings})
    try:
        use_cases = container.get(PasswordPolicyUseCases)

        if args.check_config:
            print(f"configuration ok: {use_cases.policy.as_dict()}")
            return EXIT_ACCEPTED

        verdict = use_cases.check_credential(
            args.username,
            _read_credential(args),
        )
    except (PasswordPolicyError, OSError) as err:
        print(f"configuration error: {err}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    finally:
        container.close()

    if verdict.accepted:
        print("accepted")
        return EXIT_ACCEPTED

    print(verdict.message)
    return EXIT_REJECTED


if __name__ == "__main__":
    sys.exit(main())
