from __future__ import annotations

import json
from typing import Iterable, Mapping

from dotenvk.core.editor import to_mapping
from dotenvk.core.models import ExportFormat
from dotenvk.core.shell import shell_escape
from dotenvk.parsers.types import TypedLine


def export_bash(env: Mapping[str, str]) -> str:
    return "".join(f"export {k}={shell_escape(v)}\n" for k, v in env.items())


def export_json(env: Mapping[str, str]) -> str:
    return json.dumps(dict(env), indent=2, ensure_ascii=False) + "\n"


_EXPORTERS = {
    ExportFormat.BASH: export_bash,
    ExportFormat.JSON: export_json,
}


def render_export(lines: Iterable[TypedLine], fmt: object) -> str:
    """
    Render the effective key/value set of `lines` in `fmt` (bash/json, any case).

    Raises UnsupportedExportFormatError for anything else.
    """
    exporter = _EXPORTERS[ExportFormat.parse(fmt)]
    return exporter(to_mapping(lines))
