"""CLI commands for pathkit.

This package contains all subcommand implementations.
"""

from pathkit.cli.commands import config, fs, glob, path

__all__ = ["config", "fs", "glob", "path"]
