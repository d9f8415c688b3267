"""logshelf CLI entry point."""

import typer
from rich.console import Console

app = typer.Typer(
    name="logshelf",
    help="Inspect rolling local log files",
    no_args_is_help=True,
    invoke_without_command=True,
)

console = Console()


@app.callback()
def main(
    show_version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit"
    ),
) -> None:
    """logshelf: rolling, size- and count-bounded local log files."""
    if show_version:
        from logshelf import __version__

        console.print(f"logshelf {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """Show logshelf version."""
    from logshelf import __version__

    console.print(f"logshelf {__version__}")


from logshelf.cli.files import files
from logshelf.cli.tail import tail
from logshelf.cli.cat import cat
from logshelf.cli.write import write

app.command()(files)
app.command()(tail)
app.command()(cat)
app.command()(write)


if __name__ == "__main__":
    app()
