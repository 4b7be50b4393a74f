from __future__ import annotations

from typing import Optional

import typer

from dotenvk.cli.utils.context import env_path, get_state, report_errors
from dotenvk.core.envfile import read_env_file
from dotenvk.core.export import render_export
from dotenvk.core.models import ExportFormat


def export_cmd(
    ctx: typer.Context,
    fmt: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: bash or json (default from config, else bash).",
    ),
) -> None:
    """Export the .env file as bash export statements or JSON."""
    state = get_state(ctx)
    with report_errors(state.ui):
        # validate early so a bad --format is reported even for a missing file
        chosen = ExportFormat.parse(fmt) if fmt is not None else None
        cfg = state.load_config()
        lines = read_env_file(env_path(cfg))
        typer.echo(render_export(lines, chosen or cfg.export.format), nl=False)
