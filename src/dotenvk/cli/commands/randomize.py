from __future__ import annotations

from typing import Any, Dict, List, Optional

import typer

from dotenvk.cli.ui import render_status
from dotenvk.cli.utils.context import env_path, get_state, report_errors
from dotenvk.core.envfile import read_env_file, save_env_file
from dotenvk.core.passwords import randomize


def randomize_cmd(
    ctx: typer.Context,
    keys: List[str] = typer.Argument(..., help="Keys to set with random passwords."),
    numeric: Optional[bool] = typer.Option(
        None, "--numeric/--no-numeric", help="Include numeric characters (0-9)."
    ),
    symbol: Optional[bool] = typer.Option(
        None,
        "--symbol/--no-symbol",
        help="Include symbol characters (!@#$%^&*()_+-=[]{}|;:,.<>?).",
    ),
    length: Optional[int] = typer.Option(
        None, "--length", "-l", min=1, help="Password length (default: 32)."
    ),
    xkcd: bool = typer.Option(
        False, "--xkcd", help="Generate an XKCD-style passphrase using the xkcdpass command."
    ),
) -> None:
    """Generate secure random passwords and set them for the given keys."""
    state = get_state(ctx)

    cli_overrides: Dict[str, Any] = {"randomize": {}}
    if numeric is not None:
        cli_overrides["randomize"]["numeric"] = numeric
    if symbol is not None:
        cli_overrides["randomize"]["symbol"] = symbol
    if length is not None:
        cli_overrides["randomize"]["length"] = length
    if xkcd:
        cli_overrides["randomize"]["xkcd"] = True

    with report_errors(state.ui):
        cfg = state.load_config(cli_overrides)
        path = env_path(cfg)
        lines = read_env_file(path)
        randomize(lines, keys, cfg.randomize)
        save_env_file(path, lines)

    if state.ui.verbose:
        render_status(state.ui.console, f"Randomized {len(keys)} key(s) in {path}")
