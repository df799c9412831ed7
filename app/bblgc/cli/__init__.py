"""CLI module for bblgc.

This module contains the Typer application and command definitions.
"""

from bblgc.cli.main import app

__all__ = ["app"]
