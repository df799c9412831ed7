"""Utility modules for bblgc.

This module exports commonly used utility functions.
"""

from bblgc.utils.formatting import (
    console,
    create_cleanup_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_cleanup_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
