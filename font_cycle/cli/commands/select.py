"""Select command - pick a font for a key from a list."""

from __future__ import annotations

import click

from font_cycle.cli.interact import prompt_picker
from font_cycle.cli.shared import build_cycler, console, fontset_table, require_key
from font_cycle.exceptions import HostEnvironmentError


@click.command()
@click.argument("key")
@click.pass_context
def select(ctx: click.Context, key: str) -> None:
    """Choose the font for KEY directly from its list."""
    cycler = build_cycler(ctx)
    require_key(cycler, key)

    try:
        choice = cycler.select_from_list(key, prompt_picker)
    except HostEnvironmentError as e:
        console.print(f"[red]Host rejected binding:[/red] {e}")
        raise SystemExit(1) from e

    if choice is None:
        console.print("[dim]Nothing selected[/dim]")
        return
    console.print(f"[green]Using[/green] {choice} for {key}")
    console.print(fontset_table(cycler.host.fontset))
