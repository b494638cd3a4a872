"""Command line interface for font-cycle."""

from font_cycle.cli.main import cli, main

__all__ = ["cli", "main"]
