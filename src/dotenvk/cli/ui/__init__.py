from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from dotenvk.cli.ui.formatters import render_error, render_keys_table, render_status

THEME = Theme(
    {
        "ok": "green",
        "warn": "yellow",
        "error": "bold red",
        "muted": "dim",
        "key": "cyan",
        "path": "magenta",
    }
)


@dataclass(frozen=True)
class UI:
    console: Console  # diagnostics (stderr)
    out: Console      # program output (stdout)
    verbose: bool = False


def get_ui(*, verbose: bool = False) -> UI:
    return UI(
        console=Console(stderr=True, theme=THEME),
        out=Console(theme=THEME, highlight=False),
        verbose=verbose,
    )


def setup_logging(ui: UI) -> None:
    """Route the `dotenvk` logger through Rich on stderr."""
    handler = RichHandler(
        console=ui.console, show_time=False, show_path=False, markup=False
    )
    logger = logging.getLogger("dotenvk")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if ui.verbose else logging.WARNING)
    logger.propagate = False


__all__ = [
    "UI",
    "get_ui",
    "render_error",
    "render_keys_table",
    "render_status",
    "setup_logging",
]
