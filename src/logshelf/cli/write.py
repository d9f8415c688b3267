"""Append a message from the shell."""

from typing import Optional

import typer

from logshelf.cli.common import DIR_HELP, console, open_store


def write(
    message: str = typer.Argument(..., help="Message to append"),
    directory: Optional[str] = typer.Option(None, "--dir", "-d", help=DIR_HELP),
) -> None:
    """Append one line to the log directory (starts a new file)."""
    store = open_store(directory)
    with store:
        store.write(message)
        store.flush()
        if store.has_logging_error:
            console.print(f"[red]Could not write to {store.directory}[/red]")
            raise typer.Exit(1)
    console.print(f"[green]Logged:[/green] {message}")
