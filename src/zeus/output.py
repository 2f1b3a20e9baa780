"""Console output helpers."""

# ruff: noqa: T201 -- output layer

import sys
from collections.abc import Sequence
from typing import NoReturn

import typer
from rich.table import Table
from rich.text import Text


def print_plain(*messages: object, end: str = "\n") -> None:
    """Print messages separated by spaces to stdout."""
    print(*messages, end=end)


def make_table(columns: Sequence[str], rows: Sequence[Sequence[str]], *, title: str | None = None) -> Table:
    """Build a Rich table from string rows."""
    table = Table(title=Text(title) if title is not None else None)
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*row)
    return table


def fatal(message: str, code: int = 1) -> NoReturn:
    """Print an error to stderr and exit with ``code``."""
    print(f"Error: {message}", file=sys.stderr)
    raise typer.Exit(code)
