"""funcinit CLI entry point."""

import typer

from funcinit import __version__
from funcinit.cli.init_cmd import init

app = typer.Typer(
    name="funcinit",
    help="Scaffolding for serverless function projects",
    no_args_is_help=True,
)

# Register subcommands
app.command()(init)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"funcinit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Scaffolding for serverless function projects."""
