"""Stream a whole log file."""

from typing import Optional

import typer

from logshelf.cli.common import DIR_HELP, open_store, resolve_file


def cat(
    target: str = typer.Argument("0", help="File index (0 = newest) or path"),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Stop after N lines"),
    directory: Optional[str] = typer.Option(None, "--dir", "-d", help=DIR_HELP),
) -> None:
    """Print every line of a log file."""
    store = open_store(directory)
    path = resolve_file(store, target)

    for count, line in enumerate(store.iter_lines(path), start=1):
        typer.echo(line)
        if limit is not None and count >= limit:
            break
