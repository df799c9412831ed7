"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from bblgc import __version__
from bblgc.cli.commands import cleanup
from bblgc.utils.formatting import err_console

# Create main Typer app
app = typer.Typer(
    name="bblgc",
    help="Clean up bbl state directories after an environment is destroyed.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"bblgc version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route bblgc log records to stderr through Rich.

    Args:
        verbose: If True, emit debug records; otherwise warnings only.
    """
    pkg_logger = logging.getLogger("bblgc")
    pkg_logger.handlers.clear()
    handler = RichHandler(console=err_console, show_path=False, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """bblgc - Selective cleanup of bbl state directories.

    Removes the files bbl generated into a state directory and keeps
    anything you added yourself.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(verbose)


app.command(name="cleanup")(cleanup.cleanup)


if __name__ == "__main__":
    app()
