"""Configuration commands.

Provides commands to show the effective discovery configuration and to
write a default configuration file.
"""

from pathlib import Path
from typing import Annotated

import typer

from pathkit.core.config import get_default_config, load_config_or_default, save_config
from pathkit.core.errors import ConfigError
from pathkit.core.paths import get_config_path
from pathkit.utils.formatting import (
    console,
    create_table,
    print_error,
    print_info,
    print_success,
    print_warning,
)

app = typer.Typer(
    help="Show and initialize configuration.",
    no_args_is_help=True,
)

ConfigPathOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Config file (default: XDG config path)."),
]


@app.command()
def show(config_path: ConfigPathOption = None) -> None:
    """Show the effective configuration."""
    path = config_path or get_config_path()
    try:
        config = load_config_or_default(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not path.exists():
        print_info(f"No config file at {path}, showing defaults.")

    table = create_table("Configuration", "Setting", "Value")
    table.add_row("include", ", ".join(config.include))
    table.add_row("exclude", ", ".join(config.exclude))
    table.add_row(
        "case_sensitive",
        "probe" if config.case_sensitive is None else str(config.case_sensitive).lower(),
    )
    table.add_row("max_depth", "unlimited" if config.max_depth is None else str(config.max_depth))
    console.print(table)


@app.command()
def init(
    config_path: ConfigPathOption = None,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a default configuration file."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(get_default_config(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
