"""azgit command line interface."""

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .exceptions import ConfigError
from .manager import IdentityManager
from .models import IdentityPaths

app = typer.Typer(
    name="azgit",
    help="AzGit manages Git identities.",
    add_completion=False,
)


def _fail(error: ConfigError) -> None:
    typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def _callback(
    ctx: typer.Context,
    home: Optional[Path] = typer.Option(
        None,
        "--home",
        envvar="AZGIT_HOME",
        help="Home directory to resolve ~/.config/azgit and ~/.gitconfig from.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """A simple tool to manage and switch between different Git identities."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        manager = IdentityManager(IdentityPaths.from_home(home))
        manager.ensure_initialized()
    except ConfigError as e:
        _fail(e)

    ctx.obj = manager
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("list")
def list_identities(ctx: typer.Context) -> None:
    """List all identities."""
    manager: IdentityManager = ctx.obj
    try:
        manager.list_identities(sys.stdout)
    except ConfigError as e:
        _fail(e)


def main() -> None:
    app(prog_name="azgit")
