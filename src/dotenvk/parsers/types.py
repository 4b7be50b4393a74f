from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass
class KeyValue:
    """ A `KEY=value` line. `value` is already decoded (quotes/escapes resolved)."""
    key: str
    value: str


@dataclass(frozen=True)
class Comment:
    """ A comment line, kept verbatim."""
    raw: str


@dataclass(frozen=True)
class Empty:
    """ A blank or whitespace-only line, kept verbatim."""
    raw: str


TypedLine = Union[KeyValue, Comment, Empty]
