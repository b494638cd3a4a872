"""CLI commands for font-cycle."""

from font_cycle.cli.commands.apply import apply
from font_cycle.cli.commands.fonts import fonts
from font_cycle.cli.commands.rotate import rotate
from font_cycle.cli.commands.select import select
from font_cycle.cli.commands.specs import specs

__all__ = ["apply", "fonts", "rotate", "select", "specs"]
