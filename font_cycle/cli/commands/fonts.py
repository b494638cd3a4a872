"""Fonts command - list installed font families."""

from __future__ import annotations

import click
from rich.table import Table

from font_cycle.cli.shared import console
from font_cycle.fonts import SystemFonts


@click.command()
@click.option("--family", help="Filter by font family name")
def fonts(family: str | None) -> None:
    """List installed font families usable in specs."""
    system_fonts = SystemFonts()

    with console.status("[bold green]Loading fonts..."):
        system_fonts.prewarm()

    table = Table(title="Installed Fonts")
    table.add_column("Family", style="cyan")

    count = 0
    for name in system_fonts.families():
        if family and family.lower() not in name.lower():
            continue
        table.add_row(name)
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} families")
