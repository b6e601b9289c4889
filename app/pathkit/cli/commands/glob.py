"""Wildcard pattern commands.

Provides commands to test candidate paths against a pattern, show a
pattern's wildcard root, and find files on disk with include and exclude
patterns.
"""

import json
import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from pathkit.core.components import normalize_slashes, resolve_paths
from pathkit.core.config import load_config_or_default
from pathkit.core.errors import PathkitError
from pathkit.core.wildcard import (
    build_file_spec,
    build_wildcard_matcher,
    has_directory_wildcard,
    wildcard_root,
)
from pathkit.filesystem.discovery import discover_files
from pathkit.filesystem.local import LocalFileSystem
from pathkit.utils.formatting import (
    console,
    create_table,
    format_match,
    print_error,
    print_success,
)

app = typer.Typer(
    help="Match paths against wildcard patterns.",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for file discovery."""

    TABLE = "table"
    JSON = "json"


BaseOption = Annotated[
    str | None,
    typer.Option(
        "--base",
        "-b",
        help="Base directory for relative patterns (default: current directory).",
    ),
]


def _base_dir(base: str | None) -> str:
    return normalize_slashes(base if base is not None else os.getcwd())


@app.command()
def match(
    pattern: Annotated[str, typer.Argument(help="Wildcard pattern.")],
    candidates: Annotated[list[str], typer.Argument(help="Paths to test.")],
    base: BaseOption = None,
    ignore_case: Annotated[
        bool,
        typer.Option("--ignore-case", "-i", help="Match case-insensitively."),
    ] = False,
) -> None:
    """Test candidate paths against a pattern (exit code 1 if none match).

    Relative candidates are resolved against the base directory, like the
    pattern itself.
    """
    base_dir = _base_dir(base)
    matches = build_wildcard_matcher(base_dir, pattern, case_sensitive=not ignore_case)

    table = create_table(f"Matches for {pattern}", "Candidate", "Result")
    matched = 0
    for candidate in candidates:
        result = matches(resolve_paths(base_dir, candidate))
        if result:
            matched += 1
        table.add_row(candidate, format_match(result))
    console.print(table)

    console.print(f"\n[muted]{matched} of {len(candidates)} candidates matched[/muted]")
    if not matched:
        raise typer.Exit(code=1)


@app.command()
def root(
    pattern: Annotated[str, typer.Argument(help="Wildcard pattern.")],
    base: BaseOption = None,
) -> None:
    """Print the deepest directory that holds every match of a pattern."""
    typer.echo(wildcard_root(_base_dir(base), pattern))
    if has_directory_wildcard(pattern):
        console.print("[muted](pattern matches in subdirectories)[/muted]")


@app.command()
def find(
    patterns: Annotated[
        list[str] | None,
        typer.Argument(help="Include patterns (default: from config)."),
    ] = None,
    base: BaseOption = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option("--exclude", "-x", help="Additional exclude pattern (repeatable)."),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file to read."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Find files under the base directory matching include patterns."""
    fs = LocalFileSystem()
    base_dir = _base_dir(base)

    try:
        config = load_config_or_default(config_path)
        case_sensitive = config.resolve_case_sensitive(fs)
    except (PathkitError, OSError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    includes = [build_file_spec(base_dir, p, case_sensitive) for p in patterns or config.include]
    excludes = [
        build_file_spec(base_dir, p, case_sensitive) for p in [*config.exclude, *(exclude or [])]
    ]

    files = discover_files(fs, includes, excludes, max_depth=config.max_depth)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(files, indent=2))
        return

    if not files:
        print_success("No matching files found.")
        return

    table = create_table("Discovered Files", "Path")
    for file in files:
        table.add_row(file)
    console.print(table)
    console.print(f"\n[muted]Found {len(files)} files[/muted]")
