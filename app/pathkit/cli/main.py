"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from pathkit import __version__
from pathkit.cli.commands import config, fs, glob, path

# Create main Typer app
app = typer.Typer(
    name="pathkit",
    help="Cross-platform path resolution and wildcard matching.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathkit version {__version__}")
        raise typer.Exit()


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
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """pathkit - Cross-platform path resolution and wildcard matching.

    Normalize, resolve and compare paths across POSIX, Windows and UNC
    conventions, and find files with include/exclude glob patterns.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


# Register commands
app.add_typer(path.app, name="path")
app.add_typer(glob.app, name="glob")
app.add_typer(fs.app, name="fs")
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
