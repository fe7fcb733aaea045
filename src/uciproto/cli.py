"""Command-line interface for uciproto."""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from uciproto import __version__
from uciproto.core.configs import AppConfig, load_app_config
from uciproto.core.utils.logging import setup_logging
from uciproto.uci import CommunicationDirection, parse_line, serialize

app = typer.Typer(
    name="uciproto",
    help="uciproto: UCI message decoding and normalization",
    add_completion=False,
)
console = Console()

_DIRECTIONS = {
    "engine": CommunicationDirection.GUI_TO_ENGINE,
    "gui": CommunicationDirection.ENGINE_TO_GUI,
}


def _read_lines(source: Path | None) -> list[str]:
    if source is None:
        return sys.stdin.read().splitlines()
    if not source.exists():
        raise typer.BadParameter(f"File not found: {source}")
    return source.read_text(encoding="utf-8").splitlines()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    overrides: Optional[list[str]] = typer.Option(None, "--set", "-s", help="Config override, e.g. codec.legacy_black_time_token=true"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override logging.level"),
) -> None:
    """Load configuration and set up logging for every command."""
    if log_level is not None:
        overrides = [*(overrides or []), f"logging.level={log_level}"]

    try:
        app_config = load_app_config(config, overrides)
    except (FileNotFoundError, TypeError, ValueError) as err:
        raise typer.BadParameter(str(err)) from err

    setup_logging(app_config.logging)
    ctx.obj = app_config


@app.command()
def version() -> None:
    """Print version information."""
    console.print(f"[bold blue]uciproto[/bold blue] v{__version__}")


@app.command()
def decode(
    ctx: typer.Context,
    source: Optional[Path] = typer.Argument(None, help="Transcript file (reads stdin if omitted)"),
    show_ignored: bool = typer.Option(False, "--show-ignored", help="List lines that decoded to nothing"),
) -> None:
    """Decode a UCI transcript and show one row per message."""
    app_config: AppConfig = ctx.obj

    table = Table(title="UCI messages")
    table.add_column("Line", justify="right")
    table.add_column("Message", style="cyan")
    table.add_column("Direction")
    table.add_column("Canonical", style="green")

    decoded = ignored = 0
    for lineno, line in enumerate(_read_lines(source), start=1):
        messages = parse_line(line, app_config.codec)
        if not messages:
            if line.strip():
                ignored += 1
                if show_ignored:
                    table.add_row(str(lineno), "[dim]ignored[/dim]", "", Text(line.strip()))
            continue

        for message in messages:
            decoded += 1
            table.add_row(
                str(lineno),
                type(message).__name__,
                message.direction().value,
                Text(serialize(message, app_config.codec)),
            )

    console.print(table)
    console.print(f"[bold]{decoded}[/bold] decoded, [bold]{ignored}[/bold] ignored")


@app.command()
def normalize(
    ctx: typer.Context,
    source: Optional[Path] = typer.Argument(None, help="Transcript file (reads stdin if omitted)"),
    direction: Optional[str] = typer.Option(None, "--direction", "-d", help="Keep only 'engine'- or 'gui'-bound messages"),
) -> None:
    """Print the canonical form of every decoded message, one per line."""
    app_config: AppConfig = ctx.obj

    wanted = None
    if direction is not None:
        if direction not in _DIRECTIONS:
            raise typer.BadParameter(f"Expected one of {', '.join(_DIRECTIONS)}, got {direction!r}")
        wanted = _DIRECTIONS[direction]

    for line in _read_lines(source):
        for message in parse_line(line, app_config.codec):
            if wanted is not None and message.direction() is not wanted:
                continue
            typer.echo(serialize(message, app_config.codec))


if __name__ == "__main__":
    app()
