"""Show the end of a log file."""

from typing import Optional

import typer

from logshelf.cli.common import DIR_HELP, open_store, resolve_file
from logshelf.store.readers import DEFAULT_TAIL_BYTES


def tail(
    target: str = typer.Argument("0", help="File index (0 = newest) or path"),
    max_bytes: int = typer.Option(DEFAULT_TAIL_BYTES, "--bytes", "-c", help="Read at most this many bytes"),
    directory: Optional[str] = typer.Option(None, "--dir", "-d", help=DIR_HELP),
) -> None:
    """Print the last lines of a log file."""
    store = open_store(directory)
    path = resolve_file(store, target)
    text = store.read_tail(path, max_bytes)
    typer.echo(text, nl=not text.endswith("\n") and bool(text))
