"""Helpers shared by CLI commands."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from logshelf.output import format_error
from logshelf.store import LogStore, load_config

console = Console(highlight=False, soft_wrap=True)

DIR_HELP = "Log directory (default: $LOGSHELF_DIR, config file, ~/.logshelf/logs)"
LIST_HINT = "run `logshelf files` to list the available logs"


def open_store(directory: Optional[str]) -> LogStore:
    """Store for the requested directory; nothing is written until asked."""
    return LogStore.from_config(load_config(directory=directory))


def resolve_file(store: LogStore, target: str) -> Path:
    """Parse a CLI target (index or path) and make sure it exists.

    Exits with code 1 when it doesn't.
    """
    if target.isdigit():
        index = int(target)
        files = store.list_files()
        if index >= len(files):
            available = [str(i) for i in range(len(files))]
            console.print(
                format_error(
                    "IndexError",
                    f"no log file at index {index}",
                    suggestion=LIST_HINT,
                    available=available,
                ),
                style="red",
                markup=False,
            )
            raise typer.Exit(1)
        return files[index]

    path = Path(target)
    if not path.is_file():
        console.print(
            format_error("FileNotFoundError", f"log file {target} not found", suggestion=LIST_HINT),
            style="red",
            markup=False,
        )
        raise typer.Exit(1)
    return path
