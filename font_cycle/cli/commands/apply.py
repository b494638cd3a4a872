"""Apply command - bind every spec's current font."""

from __future__ import annotations

import click

from font_cycle.cli.shared import build_cycler, console, fontset_table
from font_cycle.exceptions import HostEnvironmentError


@click.command()
@click.pass_context
def apply(ctx: click.Context) -> None:
    """Bind the current font of every spec to its targets."""
    cycler = build_cycler(ctx)
    try:
        count = cycler.apply()
    except HostEnvironmentError as e:
        console.print(f"[red]Host rejected binding:[/red] {e}")
        raise SystemExit(1) from e

    console.print(fontset_table(cycler.host.fontset))
    console.print(f"\n[bold]Bindings:[/bold] {count}")
