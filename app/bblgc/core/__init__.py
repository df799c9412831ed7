"""Core helpers for bblgc."""
