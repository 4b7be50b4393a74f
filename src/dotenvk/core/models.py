from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, Field, field_validator

from dotenvk.core.errors import UnsupportedExportFormatError


# ================================
# Enums
# ================================


class ExportFormat(str, Enum):
    BASH = "bash"
    JSON = "json"

    @classmethod
    def choices(cls) -> List[str]:
        return [f.value for f in cls]

    @classmethod
    def parse(cls, value: object) -> "ExportFormat":
        if isinstance(value, ExportFormat):
            return value
        text = str(value).strip().lower()
        for fmt in cls:
            if fmt.value == text:
                return fmt
        raise UnsupportedExportFormatError(str(value), cls.choices())


# ================================
# Config sections (defaults only)
# ================================

DEFAULT_ENV_FILE = ".env"
DEFAULT_PASSWORD_LENGTH = 32


class FileConfig(BaseModel):
    """
    [dotenvk] section. Defaults live here.
    Repo/global/CLI overrides are merged by core/config.py.
    """

    file: str = Field(default=DEFAULT_ENV_FILE, min_length=1)


class ExportConfig(BaseModel):
    format: ExportFormat = ExportFormat.BASH

    @field_validator("format", mode="before")
    @classmethod
    def _case_insensitive(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip().lower()
        return v


class PasswordOptions(BaseModel):
    """[randomize] section, also built directly from CLI flags."""

    length: int = Field(default=DEFAULT_PASSWORD_LENGTH, ge=1)
    numeric: bool = False
    symbol: bool = False
    xkcd: bool = False
