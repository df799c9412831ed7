"""Cleanup command.

Removes bbl-generated files from a state directory after the
environment it describes has been destroyed.
"""

from pathlib import Path
from typing import Annotated

import typer

from bblgc.core.paths import require_state_dir
from bblgc.storage.fileio import LocalFileIO
from bblgc.storage.garbage_collector import GarbageCollectionError, GarbageCollector
from bblgc.storage.reporter import ConsoleReporter
from bblgc.utils.formatting import (
    console,
    create_cleanup_table,
    print_error,
    print_info,
    print_success,
)


def cleanup(
    state_dir: Annotated[
        Path | None,
        typer.Option(
            "--state-dir",
            "-s",
            help="State directory to clean up (default: $BBL_STATE_DIR or current directory).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Show what would be deleted."),
    ] = False,
) -> None:
    """Remove bbl-generated files, keeping user-managed ones."""
    try:
        directory = require_state_dir(state_dir)
    except RuntimeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    collector = GarbageCollector(LocalFileIO(dry_run=dry_run), ConsoleReporter())

    try:
        result = collector.remove(str(directory))
    except GarbageCollectionError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if result.skipped:
        print_info(f"Nothing to clean up: no bbl state found in {directory}.")
        return

    console.print(create_cleanup_table(result.removed, result.preserved, dry_run=dry_run))

    if dry_run:
        print_info(f"[DRY-RUN] {len(result.removed)} path(s) would be deleted.")
        return

    print_success(f"Removed {len(result.removed)} path(s) from {directory}.")
    if result.preserved:
        print_info(f"Kept {len(result.preserved)} user-managed path(s).")
