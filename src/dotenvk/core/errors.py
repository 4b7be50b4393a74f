from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Optional, Sequence


class ExitCode(IntEnum):
    OK = 0
    ERROR = 1
    USAGE = 2


class DotenvkError(Exception):
    """Base class for errors that are reported to the user as-is."""


class MalformedPairError(DotenvkError):
    def __init__(self, pair: str) -> None:
        self.pair = pair
        super().__init__(f"Invalid key=value pair: {pair}")


class UnsupportedExportFormatError(DotenvkError):
    def __init__(self, value: str, valid: Sequence[str] = ("bash", "json")) -> None:
        self.value = value
        self.valid = tuple(valid)
        options = " or ".join(f"'{v}'" for v in self.valid)
        super().__init__(f"Unsupported format: {value}. Use {options}")


class EnvFileIOError(DotenvkError):
    def __init__(self, path: Path, action: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.action = action
        self.cause = cause
        msg = f"Failed to {action} file: {path}"
        if cause is not None:
            msg += f" ({cause})"
        super().__init__(msg)


class PassphraseError(DotenvkError):
    """The external passphrase generator is missing or failed."""


class ConfigError(DotenvkError):
    def __init__(self, path: Optional[Path], detail: str) -> None:
        self.path = path
        self.detail = detail
        if path is None:
            super().__init__(f"Invalid command-line option: {detail}")
        else:
            super().__init__(f"Invalid config in {path}: {detail}")
