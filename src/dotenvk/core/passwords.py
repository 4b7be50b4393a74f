from __future__ import annotations

import logging
import secrets
import shutil
import string
import subprocess
from typing import Iterable, List

from dotenvk.core.editor import set_value
from dotenvk.core.errors import PassphraseError
from dotenvk.core.models import PasswordOptions
from dotenvk.parsers.types import TypedLine

log = logging.getLogger(__name__)

LETTERS = string.ascii_letters
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

XKCDPASS_CMD = ("xkcdpass", "-d-")


def password_charset(*, numeric: bool, symbol: bool) -> str:
    charset = LETTERS
    if numeric:
        charset += DIGITS
    if symbol:
        charset += SYMBOLS
    return charset


def generate_random_password(length: int = 32, numeric: bool = False, symbol: bool = False) -> str:
    if length < 1:
        raise ValueError("password length must be at least 1")
    charset = password_charset(numeric=numeric, symbol=symbol)
    return "".join(secrets.choice(charset) for _ in range(length))


def generate_xkcd_password() -> str:
    """Ask the external `xkcdpass` tool for a dash-separated passphrase."""
    if shutil.which(XKCDPASS_CMD[0]) is None:
        raise PassphraseError(
            "Failed to execute xkcdpass command. Make sure it's installed."
        )
    try:
        proc = subprocess.run(
            list(XKCDPASS_CMD), capture_output=True, text=True, check=False
        )
    except OSError as e:
        raise PassphraseError(f"Failed to execute xkcdpass command: {e}") from e

    if proc.returncode != 0:
        raise PassphraseError(f"xkcdpass command failed: {proc.stderr.strip()}")
    return proc.stdout.strip()


def generate_secret(options: PasswordOptions) -> str:
    if options.xkcd:
        return generate_xkcd_password()
    return generate_random_password(options.length, options.numeric, options.symbol)


def randomize(lines: List[TypedLine], keys: Iterable[str], options: PasswordOptions) -> None:
    """Set each key to a freshly generated secret (first match updated, else appended)."""
    for key in keys:
        set_value(lines, key, generate_secret(options))
        log.debug("generated secret for %s", key)
