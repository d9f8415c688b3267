"""List log files, newest first."""

import json
from typing import Optional

import typer
from rich.table import Table

from logshelf.cli.common import DIR_HELP, console, open_store
from logshelf.output import format_bytes, format_created, format_table
from logshelf.store.files import file_size


def files(
    directory: Optional[str] = typer.Option(None, "--dir", "-d", help=DIR_HELP),
    format_output: str = typer.Option("text", "--format", "-f", help="Output format: text, plain, json"),
) -> None:
    """List log files, newest first."""
    store = open_store(directory)
    paths = store.list_files()

    if format_output == "json":
        data = [
            {"index": i, "path": str(p), "size": file_size(p), "created": format_created(p)}
            for i, p in enumerate(paths)
        ]
        print(json.dumps(data, indent=2))
        return

    if not paths:
        console.print(f"[dim]No log files in {store.directory}[/dim]")
        return

    rows = [
        [i, p.name, format_bytes(file_size(p)), format_created(p)]
        for i, p in enumerate(paths)
    ]

    if format_output == "plain":
        print(format_table(["#", "File", "Size", "Created"], rows))
        return

    table = Table(title=f"Log files in {store.directory}")
    table.add_column("#", style="cyan")
    table.add_column("File")
    table.add_column("Size", justify="right")
    table.add_column("Created")
    for row in rows:
        table.add_row(*(str(cell) for cell in row))
    console.print(table)
