"""Rotate command - step through a key's fonts interactively."""

from __future__ import annotations

import click

from font_cycle.cli.interact import describe_keys, key_events
from font_cycle.cli.shared import build_cycler, console, fontset_table, require_key
from font_cycle.engine import InputEvent, SessionState, StepSession
from font_cycle.exceptions import HostEnvironmentError


@click.command()
@click.argument("key")
@click.pass_context
def rotate(ctx: click.Context, key: str) -> None:
    """Step through the fonts configured for KEY.

    Every step is applied immediately. Cancelling restores the font that was
    current before the first step.
    """
    config = ctx.obj["config"]
    cycler = build_cycler(ctx)
    require_key(cycler, key)

    session = cycler.session(key)
    if not session.active:
        console.print(f"[yellow]No available fonts for key '{key}'[/yellow]")
        return

    console.print(f"[bold]{key}:[/bold] {session.current}")
    console.print(f"[dim]{describe_keys(config.keys)}[/dim]")

    def show(current: StepSession, event: InputEvent) -> None:
        if event in (InputEvent.NEXT, InputEvent.PREVIOUS):
            console.print(f"  [green]→[/green] {current.current}")

    try:
        state = session.run(key_events(config.keys), on_event=show)
    except HostEnvironmentError as e:
        console.print(f"[red]Host rejected binding:[/red] {e}")
        raise SystemExit(1) from e

    if state is SessionState.CANCELLED:
        console.print(f"[yellow]Cancelled[/yellow], back to {session.current}")
    else:
        console.print(f"[green]Using[/green] {session.current}")
    console.print(fontset_table(cycler.host.fontset))
