"""
CLI interface for ffmpeg toolkit.

This module provides the command-line interface using Typer and Rich. It
exposes the filter-graph serializer, the time parsers and a viewer for saved
ffprobe JSON reports.
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import ConfigManager
from ..inspector import load_probe_report
from ..syntax import (
    EscapeContext,
    FilterOptions,
    escape,
    parse_time,
    stringify_filter_description,
)
from ..ui import ProbeReporter
from ..utils import (
    SyntaxArgumentError,
    ToolkitError,
    get_logger,
    setup_logger,
)

# Initialize Typer app
app = typer.Typer(
    name="ffmpeg-toolkit",
    help="Build ffmpeg filter syntax and inspect ffprobe reports",
    add_completion=False,
)

# Console for rich output
console = Console()

# Logger
logger = get_logger(__name__)


def parse_filter_params(params: list[str], positional: bool = False) -> FilterOptions:
    """
    Turn command-line filter parameters into filter options.

    Args:
        params: Raw parameters, ``key=value`` unless positional
        positional: Treat every parameter as a positional value

    Returns:
        A list of values or a mapping of named values

    Raises:
        SyntaxArgumentError: If a named parameter has no ``=`` or no key
    """
    if positional:
        return list(params)

    options: dict[str, str] = {}
    for param in params:
        key, sep, value = param.partition("=")
        if not sep or not key:
            raise SyntaxArgumentError(
                f"Expected key=value, got '{param}' (use --positional for plain values)", param
            )
        options[key] = value
    return options


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Write logs to file",
    ),
) -> None:
    """
    Build ffmpeg filter syntax and inspect ffprobe reports.
    """
    manager = ConfigManager(config_file)
    try:
        options = manager.logging_options(verbose=verbose, log_file=log_file)
    except ToolkitError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    setup_logger(**options)
    ctx.obj = manager


@app.command("escape")
def escape_command(
    text: str = typer.Argument(..., help="Text to escape"),
    context: EscapeContext = typer.Option(
        EscapeContext.FILTER_VALUE,
        "--context",
        "-x",
        help="Quoting context the text will be embedded in",
    ),
) -> None:
    """
    Escape text for one of ffmpeg's quoting contexts.
    """
    typer.echo(escape(text, context))


@app.command("filter")
def filter_command(
    name: str = typer.Argument(..., help="Filter name (e.g. scale)"),
    params: Optional[list[str]] = typer.Argument(None, help="Parameters as key=value"),
    positional: bool = typer.Option(
        False,
        "--positional",
        "-p",
        help="Treat parameters as positional values",
    ),
) -> None:
    """
    Render a filter description such as scale=w=1280:h=720.
    """
    try:
        options = parse_filter_params(params or [], positional=positional)
    except SyntaxArgumentError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    logger.debug(f"Rendering filter {name} with {len(options)} parameter(s)")
    typer.echo(stringify_filter_description(name, options))


@app.command("timestamp")
def timestamp_command(
    text: str = typer.Argument(..., help="Time duration, e.g. 01:02:03.5 or 200ms"),
) -> None:
    """
    Convert an ffmpeg time duration to milliseconds.
    """
    milliseconds = parse_time(text)
    if milliseconds is None:
        console.print(f"[bold red]✗ Not a time duration:[/bold red] {text}", highlight=False)
        sys.exit(1)
    typer.echo(str(milliseconds))


@app.command("probe")
def probe_command(
    ctx: typer.Context,
    report: Path = typer.Argument(
        ...,
        help="ffprobe JSON report (-print_format json)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    show_tags: Optional[bool] = typer.Option(
        None,
        "--tags/--no-tags",
        help="Show stream tags (overrides configuration)",
    ),
) -> None:
    """
    Display a saved ffprobe report.
    """
    manager: ConfigManager = ctx.obj
    display = manager.display_options(show_tags=show_tags)

    try:
        result = load_probe_report(report)
    except ToolkitError as e:
        console.print(f"[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)

    ProbeReporter(console=console, display=display).display_result(result, title=report.name)


@app.command("config")
def config_command(
    ctx: typer.Context,
    action: str = typer.Argument(..., help="Action: init, show"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for 'init' action",
    ),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """
    Manage configuration files.

    Actions:
    - init: Create a default configuration file
    - show: Display current configuration
    """
    manager: ConfigManager = ctx.obj

    if action == "init":
        output_path = output or Path(".ffmpeg-toolkit.yaml")

        try:
            manager.init_default_config(output_path, force=force)
            console.print(f"[green]✓[/green] Created config file: {output_path}")
        except ToolkitError as e:
            console.print(f"[red]✗ Error:[/red] {e}")
            sys.exit(1)

    elif action == "show":
        config = manager.config

        console.print()
        console.print(Panel("[bold cyan]Current Configuration[/bold cyan]", border_style="cyan"))
        source = str(manager.source) if manager.source else "built-in defaults"
        console.print(f"Source: {source}", highlight=False)
        console.print()

        table = Table(title="Logging", show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")
        table.add_row("Level", config.logging.level)
        table.add_row("File", str(config.logging.file) if config.logging.file else "-")
        table.add_row("Verbose", str(config.logging.verbose))
        console.print(table)
        console.print()

        table = Table(title="Display", show_header=True)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="white")
        table.add_row("Show Tags", str(config.display.show_tags))
        table.add_row("Show Chapters", str(config.display.show_chapters))
        table.add_row("Time Format", config.display.time_format)
        console.print(table)
        console.print()

    else:
        console.print(f"[red]✗ Unknown action:[/red] {action}")
        console.print("Valid actions: init, show")
        sys.exit(1)


@app.command("version")
def version_command() -> None:
    """
    Display version information.
    """
    from .. import __version__

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]ffmpeg toolkit[/bold cyan]\n" f"[dim]Version {__version__}[/dim]",
            border_style="cyan",
        )
    )
    console.print()


def main() -> None:
    """
    Main entry point for CLI.
    """
    app()


if __name__ == "__main__":
    main()
