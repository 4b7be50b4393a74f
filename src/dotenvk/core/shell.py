from __future__ import annotations

from typing import Dict, FrozenSet

# Any of these forces the value into double quotes.
TRIGGER_CHARS: FrozenSet[str] = frozenset(
    " \t\n\r\"'$`\\!*?[]{}()<>&|;#"
)

# Inside double quotes only these need escaping. Everything else in
# TRIGGER_CHARS is inert there.
ESCAPE_MAP: Dict[str, str] = {
    '"': '\\"',
    "\\": "\\\\",
    "$": "\\$",
    "`": "\\`",
    "!": "\\!",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def needs_quoting(value: str) -> bool:
    return any(ch in TRIGGER_CHARS for ch in value)


def shell_escape(value: str) -> str:
    """
    Render `value` as the right-hand side of a shell assignment.

    Values without special characters are returned unchanged. Otherwise the
    value is double-quoted with `"`, `\\`, `$`, `` ` `` and `!` backslash-escaped
    and newline/CR/tab written as `\\n`, `\\r`, `\\t`.
    """
    if not needs_quoting(value):
        return value
    body = "".join(ESCAPE_MAP.get(ch, ch) for ch in value)
    return f'"{body}"'
