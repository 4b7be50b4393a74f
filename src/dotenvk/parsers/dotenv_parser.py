from __future__ import annotations

from typing import Dict, List

from dotenvk.parsers.types import Comment, Empty, KeyValue, TypedLine


# Escapes understood inside double quotes. Anything else keeps its backslash.
_DQ_ESCAPES: Dict[str, str] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "'": "'",
}


def _decode_double_quoted(body: str) -> str:
    out: List[str] = []
    escaped = False
    for ch in body:
        if escaped:
            out.append(_DQ_ESCAPES.get(ch, "\\" + ch))
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == '"':
            # closing quote: whatever follows (inline comment etc.) is dropped
            break
        else:
            out.append(ch)
    if escaped:
        out.append("\\")
    return "".join(out)


def _decode_single_quoted(body: str) -> str:
    end = body.find("'")
    return body if end < 0 else body[:end]


def _decode_unquoted(raw: str) -> str:
    out: List[str] = []
    escaped = False
    for ch in raw:
        if escaped:
            out.append(ch)
            escaped = False
        elif ch == "\\":
            out.append(ch)
            escaped = True
        elif ch == "#":
            break
        else:
            out.append(ch)
    return "".join(out).rstrip()


def decode_value(raw: str) -> str:
    """
    Decode the right-hand side of a dotenv assignment into its logical value.

    Supported:
      KEY=plain value   # inline comment (trailing whitespace trimmed)
      KEY="double \\"quoted\\"\\n"   (\\n \\r \\t \\\\ \\" \\' escapes)
      KEY='single quoted'           (literal, no escapes)

    Unknown escapes inside double quotes are kept as-is (backslash included).
    An unterminated quote runs to the end of the value.
    """
    v = raw.lstrip()
    if not v:
        return ""

    if v[0] == '"':
        return _decode_double_quoted(v[1:])
    if v[0] == "'":
        return _decode_single_quoted(v[1:])
    return _decode_unquoted(v)


def _split_lines(text: str) -> List[str]:
    lines = text.split("\n")
    # the last piece had no "\n" after it; its "\r" (if any) is content
    last = lines.pop()
    lines = [ln[:-1] if ln.endswith("\r") else ln for ln in lines]
    if last:
        lines.append(last)
    return lines


def parse_dotenv(text: str) -> List[TypedLine]:
    """
    Classify dotenv content line by line, keeping file order.

    Blank lines become Empty and `#` lines become Comment, both verbatim.
    Lines with `=` become KeyValue (split at the first `=`, key trimmed,
    value decoded). Any other line is kept as a Comment.
    """
    out: List[TypedLine] = []
    if not text:
        return out

    for raw in _split_lines(text):
        line = raw.strip()
        if not line:
            out.append(Empty(raw))
            continue

        if line.startswith("#"):
            out.append(Comment(raw))
            continue

        if "=" not in raw:
            out.append(Comment(raw))
            continue

        key, val = raw.split("=", 1)
        out.append(KeyValue(key=key.strip(), value=decode_value(val)))

    return out
