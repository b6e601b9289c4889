"""Filesystem probing commands.

Provides commands that query the local disk: case-sensitivity detection
and on-disk casing lookup.
"""

from typing import Annotated

import typer

from pathkit.core.errors import PathkitError
from pathkit.filesystem.local import LocalFileSystem
from pathkit.filesystem.probe import is_case_sensitive
from pathkit.utils.formatting import print_error, print_info

app = typer.Typer(
    help="Query the local filesystem.",
    no_args_is_help=True,
)


@app.command()
def probe(
    path: Annotated[
        str | None,
        typer.Argument(help="Existing path to probe with (default: pathkit's install directory)."),
    ] = None,
) -> None:
    """Detect whether the filesystem is case sensitive."""
    try:
        sensitive = is_case_sensitive(LocalFileSystem(), path)
    except (PathkitError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if sensitive:
        print_info("Filesystem is case sensitive.")
    else:
        print_info("Filesystem is case insensitive.")


@app.command()
def realcase(
    path: Annotated[str, typer.Argument(help="Existing path to look up.")],
) -> None:
    """Print a path with the casing stored on disk."""
    try:
        typer.echo(LocalFileSystem().real_case_path(path))
    except OSError as e:
        print_error(f"Cannot look up {path}: {e}")
        raise typer.Exit(code=1) from e
