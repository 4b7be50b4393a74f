from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from dotenvk import __version__
from dotenvk.cli.commands.edit import set_cmd, unset_cmd
from dotenvk.cli.commands.export import export_cmd
from dotenvk.cli.commands.keys import keys_cmd
from dotenvk.cli.commands.randomize import randomize_cmd
from dotenvk.cli.ui import get_ui, setup_logging
from dotenvk.cli.utils.context import CliState

app = typer.Typer(
    name="dotenvk",
    help="Edit .env files in place and export them safely for the shell.",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"dotenvk {__version__}")
        raise typer.Exit(0)


@app.callback()
def main(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        envvar="DOTENVK_FILE",
        dir_okay=False,
        help="The .env file to operate on (default from config, else .env).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output."),
    version: bool = typer.Option(
        False, "--version", help="Show version and exit.", callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    ui = get_ui(verbose=verbose)
    setup_logging(ui)
    ctx.obj = CliState(ui=ui, file=file)


app.command("set")(set_cmd)
app.command("unset")(unset_cmd)
app.command("export")(export_cmd)
app.command("keys")(keys_cmd)
app.command("randomize")(randomize_cmd)
