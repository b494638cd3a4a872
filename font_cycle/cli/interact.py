"""Terminal drivers for the stepwise session and the font picker."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

import click
from rich.table import Table

from font_cycle.cli.shared import console
from font_cycle.config import KeyBindings
from font_cycle.engine import InputEvent


def key_map(bindings: KeyBindings) -> dict[str, InputEvent]:
    mapping: dict[str, InputEvent] = {}
    for event, keys in (
        (InputEvent.NEXT, bindings.next),
        (InputEvent.PREVIOUS, bindings.previous),
        (InputEvent.COMMIT, bindings.commit),
        (InputEvent.CANCEL, bindings.cancel),
    ):
        for key in keys:
            mapping[key] = event
    return mapping


def key_events(
    bindings: KeyBindings, getchar: Callable[[], str] = click.getchar
) -> Iterator[InputEvent | str]:
    """Yield one event per key press; unbound keys are yielded as-is.

    Ctrl-C cancels. End of input stops the stream.
    """
    mapping = key_map(bindings)
    while True:
        try:
            char = getchar()
        except (KeyboardInterrupt, EOFError):
            yield InputEvent.CANCEL
            return
        if not char:
            return
        yield mapping.get(char, char)


def describe_keys(bindings: KeyBindings) -> str:
    def show(keys: list[str]) -> str:
        names = {"\r": "Enter", "\n": "Enter", "\x1b": "Esc", "\x1b[C": "→", "\x1b[D": "←"}
        return "/".join(dict.fromkeys(names.get(k, k) for k in keys))

    return (
        f"next {show(bindings.next)}  previous {show(bindings.previous)}  "
        f"keep {show(bindings.commit)}  cancel {show(bindings.cancel)}"
    )


def candidates_table(candidates: Sequence[str], title: str) -> Table:
    table = Table(title=title)
    table.add_column("#", style="yellow", justify="right")
    table.add_column("Font", style="cyan")
    for index, name in enumerate(candidates, start=1):
        table.add_row(str(index), name)
    return table


def prompt_picker(candidates: Sequence[str]) -> str | None:
    """Pick a font by number or by filtering on a substring.

    Returns None when the list is empty or the user enters nothing.
    """
    if not candidates:
        console.print("[yellow]No fonts to choose from[/yellow]")
        return None

    shown = list(candidates)
    while True:
        console.print(candidates_table(shown, "Fonts"))
        answer = click.prompt(
            "Number or filter (empty to abort)", default="", show_default=False
        ).strip()
        if not answer:
            return None
        if answer.isdigit():
            index = int(answer)
            if 1 <= index <= len(shown):
                return shown[index - 1]
            console.print(f"[red]No entry {index}[/red]")
            continue

        matches = [c for c in candidates if answer.lower() in c.lower()]
        if len(matches) == 1:
            return matches[0]
        if not matches:
            console.print(f"[yellow]Nothing matches '{answer}'[/yellow]")
            shown = list(candidates)
        else:
            shown = matches
