from __future__ import annotations

from dotenvk.parsers.dotenv_parser import decode_value, parse_dotenv
from dotenvk.parsers.types import Comment, Empty, KeyValue, TypedLine
from dotenvk.parsers.writer import render_dotenv, render_line

__all__ = [
    "Comment",
    "Empty",
    "KeyValue",
    "TypedLine",
    "decode_value",
    "parse_dotenv",
    "render_dotenv",
    "render_line",
]
