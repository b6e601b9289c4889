"""Utility modules for pathkit.

This module exports commonly used utility functions.
"""

from pathkit.utils.formatting import (
    console,
    create_table,
    err_console,
    format_match,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_table",
    "err_console",
    "format_match",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
