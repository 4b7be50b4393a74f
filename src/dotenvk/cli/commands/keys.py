from __future__ import annotations

import typer

from dotenvk.cli.ui import render_keys_table
from dotenvk.cli.utils.context import env_path, get_state, report_errors
from dotenvk.core.editor import list_keys
from dotenvk.core.envfile import read_env_file


def keys_cmd(
    ctx: typer.Context,
    table: bool = typer.Option(
        False, "--table", help="Show a table (position, duplicates) instead of plain keys."
    ),
) -> None:
    """List all keys from the .env file, in file order."""
    state = get_state(ctx)
    with report_errors(state.ui):
        path = env_path(state.load_config())
        keys = list_keys(read_env_file(path))

    if table:
        render_keys_table(state.ui.out, keys, path=path)
        return
    for key in keys:
        typer.echo(key)
