"""funcinit init CLI command for function app scaffolding.

Creates a new function app in the given folder (default: current
directory). Prompts for the worker runtime when --worker-runtime is not
given. Existing files are never overwritten.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from funcinit.cli.prompt import select_with_arrows
from funcinit.models.runtime import available_worker_runtimes_string
from funcinit.models.workflow import InitOptions
from funcinit.scaffold.errors import FuncInitError, UserInputError
from funcinit.scaffold.init import InitWorkflow

console = Console()

# Exit code mapping: error kind -> exit code
EXIT_USER_INPUT = 1
EXIT_WORKFLOW = 2


def init(
    folder: str = typer.Argument("", help="Folder to create the function app in"),
    source_control: bool = typer.Option(
        False, "--source-control", help="Run git init. Default is false."
    ),
    worker_runtime: Optional[str] = typer.Option(
        None,
        "--worker-runtime",
        help=f"Runtime framework for the functions. Options are: {available_worker_runtimes_string()}",
    ),
    docker: bool = typer.Option(
        False, "--docker", help="Create a Dockerfile based on the selected worker runtime"
    ),
    docker_only: bool = typer.Option(
        False,
        "--docker-only",
        help=(
            "Adds a Dockerfile to an existing function app project. Will prompt for "
            "worker-runtime if not specified or set in local.settings.json"
        ),
    ),
    csx: bool = typer.Option(False, "--csx", help="Use csx dotnet functions"),
    language: Optional[str] = typer.Option(
        None,
        "--language",
        help=(
            "Initialize a language specific project. Currently supported when "
            "--worker-runtime is node. Options are typescript and javascript"
        ),
    ),
) -> None:
    """Create a new function app in the current folder or FOLDER.

    Writes .gitignore, host.json, local.settings.json and editor
    recommendations, plus runtime- and language-specific files.
    """
    options = InitOptions(
        folder=folder,
        source_control=source_control,
        worker_runtime=worker_runtime,
        language=language,
        docker=docker,
        docker_only=docker_only,
        csx=csx,
    )
    workflow = InitWorkflow(options, selector=select_with_arrows, console=console)

    try:
        workflow.run()
    except UserInputError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_USER_INPUT)
    except FuncInitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=EXIT_WORKFLOW)
