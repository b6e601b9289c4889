"""Path manipulation commands.

Provides commands to split, resolve, relate and compare paths, and to
merge folder lists by containment.
"""

import json
from enum import Enum
from typing import Annotated

import typer

from pathkit.core.components import resolve_paths, split_components
from pathkit.core.dedupe import dedupe_folders
from pathkit.core.relative import contains_path, relative_path
from pathkit.utils.formatting import console, create_table, print_info, print_success

app = typer.Typer(
    help="Split, resolve and compare paths.",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options for component listings."""

    TABLE = "table"
    JSON = "json"


IgnoreCaseOption = Annotated[
    bool,
    typer.Option("--ignore-case", "-i", help="Compare path segments case-insensitively."),
]


@app.command()
def split(
    path: Annotated[str, typer.Argument(help="Path to split.")],
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
    """Split a path into its reduced components."""
    components = split_components(path)

    if output_format == OutputFormat.JSON:
        typer.echo(json.dumps(components))
        return

    table = create_table("Path Components", "#", "Component")
    for index, component in enumerate(components):
        label = component if component else "[muted](relative)[/muted]"
        table.add_row(str(index), label)
    console.print(table)


@app.command()
def resolve(
    base: Annotated[str, typer.Argument(help="Base path.")],
    fragments: Annotated[
        list[str] | None,
        typer.Argument(help="Fragments to resolve against the base, left to right."),
    ] = None,
) -> None:
    """Resolve fragments against a base path."""
    typer.echo(resolve_paths(base, *(fragments or [])))


@app.command()
def relative(
    from_path: Annotated[str, typer.Argument(metavar="FROM", help="Starting path.")],
    to_path: Annotated[str, typer.Argument(metavar="TO", help="Target path.")],
    ignore_case: IgnoreCaseOption = False,
) -> None:
    """Print the relative path from FROM to TO."""
    typer.echo(relative_path(from_path, to_path, ignore_case))


@app.command()
def contains(
    parent: Annotated[str, typer.Argument(help="Candidate parent path.")],
    child: Annotated[str, typer.Argument(help="Candidate child path.")],
    ignore_case: IgnoreCaseOption = False,
) -> None:
    """Check whether CHILD lies within PARENT (exit code 1 if not)."""
    if contains_path(parent, child, ignore_case):
        print_success(f"{parent} contains {child}")
        return

    print_info(f"{parent} does not contain {child}")
    raise typer.Exit(code=1)


@app.command()
def dedupe(
    lists: Annotated[
        list[str],
        typer.Argument(help="Folder lists, entries separated by commas."),
    ],
) -> None:
    """Merge folder lists, dropping folders covered by another folder."""
    folder_lists = [[f.strip() for f in group.split(",") if f.strip()] for group in lists]
    for folder in sorted(dedupe_folders(folder_lists)):
        typer.echo(folder)
