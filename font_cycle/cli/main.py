"""Entry point for the font-cycle command line."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from font_cycle import __version__
from font_cycle.cli.commands import apply, fonts, rotate, select, specs
from font_cycle.cli.shared import console
from font_cycle.config import Config
from font_cycle.exceptions import ConfigError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def setup_logging(level: str) -> None:
    """Route the package logger through rich at ``level``."""
    logger = logging.getLogger("font_cycle")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


@click.group()
@click.version_option(__version__, prog_name="font-cycle")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="Configuration file (default: $FONT_CYCLE_CONFIG or ~/.config/font-cycle/config.yaml)",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging level",
)
@click.option("--dry-run", is_flag=True, help="Treat configured fonts as installed")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str, dry_run: bool) -> None:
    """Cycle per-script fonts through configured lists."""
    ctx.ensure_object(dict)
    log_level = log_level.upper()
    setup_logging(log_level)
    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        raise SystemExit(1) from e
    ctx.obj["config"] = config
    ctx.obj["log_level"] = log_level
    ctx.obj["dry_run"] = dry_run


cli.add_command(specs)
cli.add_command(apply)
cli.add_command(rotate)
cli.add_command(select)
cli.add_command(fonts)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
