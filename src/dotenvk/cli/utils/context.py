from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import typer

from dotenvk.cli.ui import UI, get_ui, render_error
from dotenvk.core.config import LoadedConfig, load_config
from dotenvk.core.errors import DotenvkError, ExitCode


@dataclass(frozen=True)
class CliState:
    ui: UI
    file: Optional[Path] = None

    def load_config(self, cli_overrides: Optional[Dict[str, Any]] = None) -> LoadedConfig:
        overrides: Dict[str, Any] = dict(cli_overrides or {})
        if self.file is not None:
            overrides["dotenvk"] = {"file": str(self.file)}
        return load_config(start_dir=Path.cwd(), cli_overrides=overrides)


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    if state is None:  # command invoked without the root callback (tests)
        state = CliState(ui=get_ui())
    return state


def env_path(cfg: LoadedConfig) -> Path:
    return Path(cfg.files.file).expanduser()


@contextmanager
def report_errors(ui: UI) -> Iterator[None]:
    """Print DotenvkError to stderr and exit 1."""
    try:
        yield
    except DotenvkError as e:
        render_error(ui.console, e)
        raise typer.Exit(code=int(ExitCode.ERROR)) from e
