"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme

THEME = Theme(
    {
        "muted": "#b2bec3",
        "bold_header": "bold #69B9A1",
        "border": "#29526d",
        "success": "#03b971",
        "warning": "#f5b332",
        "error": "#f53263",
        "info": "#0ec1c8",
        "removed": "#f53263",
        "kept": "#c1ff62",
    }
)


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances
console = Console(theme=THEME, color_system=_detect_color_system())
err_console = Console(theme=THEME, stderr=True, color_system=_detect_color_system())


def create_cleanup_table(removed: list[str], preserved: list[str], dry_run: bool = False) -> Table:
    """Create a Rich table listing removed and preserved paths.

    Args:
        removed: Paths deleted by the cleanup.
        preserved: Paths left in place because bbl did not create them.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for cleanup display.
    """
    title = "Cleanup (Dry Run)" if dry_run else "Cleanup"

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Action", width=8, justify="center")
    table.add_column("Path")

    for path in removed:
        table.add_row("[removed]-delete[/removed]", f"[muted]{escape(path)}[/muted]")
    for path in preserved:
        table.add_row("[kept]=keep[/kept]", escape(path))

    return table


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}", highlight=False)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {escape(message)}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{escape(message)}[/]")
