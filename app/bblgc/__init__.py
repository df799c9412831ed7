"""bblgc - selective cleanup of bbl state directories."""

__version__ = "0.1.0"
