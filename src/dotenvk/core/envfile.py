from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from dotenvk.core.errors import EnvFileIOError
from dotenvk.parsers.dotenv_parser import parse_dotenv
from dotenvk.parsers.types import TypedLine
from dotenvk.parsers.writer import render_dotenv

log = logging.getLogger(__name__)


def read_env_file(path: Path) -> List[TypedLine]:
    """Parse `path`. A missing file is an empty env, not an error."""
    if not path.exists():
        log.debug("%s does not exist, starting empty", path)
        return []
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileIOError(path, "read", e) from e
    lines = parse_dotenv(text)
    log.debug("read %d line(s) from %s", len(lines), path)
    return lines


def save_env_file(path: Path, lines: Sequence[TypedLine]) -> None:
    content = render_dotenv(lines)
    try:
        # single write; no temp-file swap
        with path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.write(content)
    except OSError as e:
        raise EnvFileIOError(path, "write", e) from e
    log.debug("wrote %d line(s) to %s", len(lines), path)
