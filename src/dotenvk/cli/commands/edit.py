from __future__ import annotations

from typing import List

import typer

from dotenvk.cli.ui import render_status
from dotenvk.cli.utils.context import env_path, get_state, report_errors
from dotenvk.core.editor import set_pairs, unset_keys
from dotenvk.core.envfile import read_env_file, save_env_file


def set_cmd(
    ctx: typer.Context,
    pairs: List[str] = typer.Argument(..., help="KEY=value pairs to set."),
) -> None:
    """Set one or more KEY=value pairs in the .env file."""
    state = get_state(ctx)
    with report_errors(state.ui):
        path = env_path(state.load_config())
        lines = read_env_file(path)
        # a malformed pair aborts before anything is written
        set_pairs(lines, pairs)
        save_env_file(path, lines)

    if state.ui.verbose:
        render_status(state.ui.console, f"Set {len(pairs)} key(s) in {path}")


def unset_cmd(
    ctx: typer.Context,
    keys: List[str] = typer.Argument(..., help="Keys to remove."),
) -> None:
    """Remove one or more keys from the .env file."""
    state = get_state(ctx)
    with report_errors(state.ui):
        path = env_path(state.load_config())
        lines = read_env_file(path)
        unset_keys(lines, keys)
        save_env_file(path, lines)

    if state.ui.verbose:
        render_status(state.ui.console, f"Unset {len(keys)} key(s) in {path}")
