"""Specs command - show configured keys and their fonts."""

from __future__ import annotations

import click
from rich.table import Table

from font_cycle.cli.shared import build_cycler, console
from font_cycle.exceptions import DiagnosticKind


@click.command()
@click.pass_context
def specs(ctx: click.Context) -> None:
    """Show configured keys, current fonts and validation problems."""
    with console.status("[bold green]Checking fonts..."):
        cycler = build_cycler(ctx)

    if not len(cycler.registry):
        console.print("[yellow]No specs configured[/yellow]")
        return

    table = Table(title="Font specs")
    table.add_column("Key", style="bold")
    table.add_column("Current", style="green")
    table.add_column("Fallbacks", style="dim")
    table.add_column("Targets", style="cyan")

    for spec in cycler.registry:
        table.add_row(
            spec.key,
            spec.head or "[red]none available[/red]",
            ", ".join(spec.fallbacks),
            ", ".join(str(t) for t in spec.targets),
        )
    console.print(table)

    for diagnostic in cycler.diagnostics:
        style = "red" if diagnostic.kind is DiagnosticKind.EMPTY_RESOURCE_LIST else "yellow"
        console.print(f"[{style}]Warning:[/{style}] {diagnostic}")
