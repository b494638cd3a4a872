"""Helpers shared by the CLI commands."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from font_cycle.api import FontCycler
from font_cycle.config import Config
from font_cycle.exceptions import NotFoundError
from font_cycle.fonts import Fontset, RecordingHost, SystemFontHost

console = Console()


def build_cycler(ctx: click.Context) -> FontCycler:
    """Create the cycler for a command from the group's context."""
    config: Config = ctx.obj.get("config") or Config.load()
    if ctx.obj.get("dry_run"):
        names = {name for spec in config.specs for name in spec.fonts}
        host = RecordingHost(names, base_size=config.base_size)
    else:
        host = SystemFontHost(base_size=config.base_size)
    return FontCycler.from_config(host, config)


def require_key(cycler: FontCycler, key: str) -> None:
    """Exit with an error unless ``key`` is configured."""
    try:
        cycler.spec(key)
    except NotFoundError as e:
        console.print(f"[red]Error:[/red] {e}")
        known = ", ".join(cycler.registry.keys()) or "none"
        console.print(f"[dim]Configured keys:[/dim] {known}")
        raise SystemExit(1) from None


def fontset_table(fontset: Fontset, title: str = "Fontset") -> Table:
    table = Table(title=title)
    table.add_column("Target", style="cyan")
    table.add_column("Primary", style="green")
    table.add_column("Fallbacks", style="dim")
    table.add_column("Size", style="yellow")

    for target, fonts in fontset.bindings.items():
        primary = fonts[0]
        table.add_row(
            str(target),
            primary.family,
            ", ".join(f.family for f in fonts[1:]),
            f"{primary.size:g}",
        )
    return table
