from __future__ import annotations

from typing import Iterable

from dotenvk.parsers.types import Comment, Empty, KeyValue, TypedLine


def render_line(line: TypedLine) -> str:
    if isinstance(line, KeyValue):
        # values are written back unquoted; quoting style is not preserved
        return f"{line.key}={line.value}"
    if isinstance(line, (Comment, Empty)):
        return line.raw
    raise TypeError(f"Not a dotenv line: {line!r}")


def render_dotenv(lines: Iterable[TypedLine]) -> str:
    """Render typed lines back into file text, newline-terminated unless empty."""
    content = "\n".join(render_line(ln) for ln in lines)
    if not content:
        return content
    return content + "\n"
