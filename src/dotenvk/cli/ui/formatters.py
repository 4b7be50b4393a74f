from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text


def render_error(console: Console, err: BaseException) -> None:
    # user input ends up in messages; never treat it as markup
    console.print(Text(f"Error: {err}", style="error"), soft_wrap=True)


def render_status(console: Console, message: str) -> None:
    console.print(Text(message, style="ok"), soft_wrap=True)


# ----------------------------
# Keys table
# ----------------------------

def render_keys_table(
    console: Console,
    keys: Sequence[str],
    *,
    path: Optional[Path] = None,
) -> None:
    if not keys:
        console.print("[muted]No keys.[/muted]")
        return

    title = f"Keys ({len(keys)})"
    if path is not None:
        title += f" in {path}"
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Key", style="key")
    table.add_column("Note", style="muted")

    # earlier duplicates are shadowed by the last occurrence
    remaining = Counter(keys)
    for idx, key in enumerate(keys, start=1):
        remaining[key] -= 1
        note = "shadowed" if remaining[key] > 0 else ""
        table.add_row(str(idx), Text(key), note)

    console.print(table)
