"""CLI package for pathkit.

This package contains the Typer application and all subcommands.
"""

from pathkit.cli.main import app

__all__ = ["app"]
