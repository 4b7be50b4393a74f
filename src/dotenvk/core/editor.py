from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from dotenvk.core.errors import MalformedPairError
from dotenvk.parsers.types import KeyValue, TypedLine

log = logging.getLogger(__name__)


def split_pair(pair: str) -> tuple[str, str]:
    if "=" not in pair:
        raise MalformedPairError(pair)
    key, value = pair.split("=", 1)
    return key.strip(), value


def set_value(lines: List[TypedLine], key: str, value: str) -> None:
    """Update the first `key` line in place, or append a new one at the end."""
    for line in lines:
        if isinstance(line, KeyValue) and line.key == key:
            line.value = value
            log.debug("updated %s", key)
            return
    lines.append(KeyValue(key=key, value=value))
    log.debug("appended %s", key)


def set_pairs(lines: List[TypedLine], pairs: Iterable[str]) -> None:
    """
    Apply `KEY=value` pairs in order.

    A pair without `=` raises MalformedPairError right away; pairs applied
    before it in the same call are kept.
    """
    for pair in pairs:
        key, value = split_pair(pair)
        set_value(lines, key, value)


def unset_keys(lines: List[TypedLine], keys: Iterable[str]) -> None:
    """Drop every KeyValue line whose key is in `keys`. Other lines stay put."""
    drop = set(keys)
    before = len(lines)
    lines[:] = [
        ln for ln in lines if not (isinstance(ln, KeyValue) and ln.key in drop)
    ]
    log.debug("removed %d line(s)", before - len(lines))


def to_mapping(lines: Iterable[TypedLine]) -> Dict[str, str]:
    """Project lines into a dict. Later duplicates win."""
    out: Dict[str, str] = {}
    for ln in lines:
        if isinstance(ln, KeyValue):
            out[ln.key] = ln.value
    return out


def list_keys(lines: Iterable[TypedLine]) -> List[str]:
    return [ln.key for ln in lines if isinstance(ln, KeyValue)]
