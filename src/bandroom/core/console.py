"""Rich console helpers for CLI output."""

from typing import Iterable, Tuple

from rich.console import Console
from rich.table import Table

_console: Console | None = None


def get_console() -> Console:
    """Get or create the shared Rich Console."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def safe_print(message: str, style: str | None = None) -> None:
    """Print a message, optionally styled (e.g. "bold red", "green")."""
    if style:
        get_console().print(message, style=style)
    else:
        get_console().print(message)


def print_key_values(title: str, rows: Iterable[Tuple[str, object]]) -> None:
    """Render (label, value) pairs as a two-column table.

    None values render as "-".
    """
    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column("field", style="bold cyan")
    table.add_column("value")
    for label, value in rows:
        table.add_row(label, "-" if value is None else str(value))
    get_console().print(table)
