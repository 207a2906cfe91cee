"""Main CLI entry point for jobfilter."""

import sys
from pathlib import Path
from typing import Optional
import typer
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from ..core.config import load_config, get_config
from ..core.errors import ConfigurationError
from ..core.log import configure_logging, get_logger
from .commands.filter import filter_app


class GlobalCliOptions(BaseModel):
    """Global CLI options that can be used across all commands."""

    verbose: int = Field(0, description="Increase verbosity level")
    config_file: Optional[Path] = Field(None, description="Configuration file path")
    log_level: Optional[str] = Field(
        None, description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )


app = typer.Typer(
    name="jobfilter",
    help="Regular expression job filters for hierarchical job catalogs",
    no_args_is_help=True,
    rich_markup_mode="markdown",
)
app.add_typer(filter_app, name="filter", help="Evaluate regex job filters")
console = Console()
logger = get_logger(__name__)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: int = typer.Option(
        0, "--verbose", "-v", count=True, help="Increase verbosity level"
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR) - explicit level",
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
) -> None:
    """jobfilter: regular expression job filters."""
    if verbose > 0 and log_level is not None:
        console.print("[red]Error: Cannot specify both --verbose and --log-level[/red]")
        raise typer.Exit(1)

    if log_level is None and verbose > 0:
        log_level = "DEBUG" if verbose >= 2 else "INFO"

    cli_options = GlobalCliOptions(
        verbose=verbose,
        config_file=config_file,
        log_level=log_level,
    )

    ctx.ensure_object(dict)
    ctx.obj["cli_options"] = cli_options

    try:
        config = load_config(
            config_file=cli_options.config_file,
            log_level=cli_options.log_level,
            verbose=cli_options.verbose or None,
        )
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    # Without explicit flags the console stays quiet
    console_level = cli_options.log_level or "WARNING"
    configure_logging(
        level=config.log_level,
        log_file=config.log_file,
        enable_json=config.log_file is not None,
        enable_console=True,
        console_level=console_level,
    )


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__
    import pydantic

    table = Table(title="jobfilter Version Information")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")
    table.add_row("jobfilter", __version__)
    table.add_row("pydantic", pydantic.VERSION)
    table.add_row("typer", typer.__version__)
    console.print(table)


@app.command()
def config() -> None:
    """Show current configuration."""
    current_config = get_config()
    table = Table(title="jobfilter Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Log Level", current_config.log_level)
    table.add_row("Verbose", str(current_config.verbose))
    if current_config.log_file:
        table.add_row("Log File", str(current_config.log_file))
    table.add_row("Default Value Type", current_config.default_value_type)
    table.add_row("Filters", str(len(current_config.filters)))
    for index, settings in enumerate(current_config.filters, start=1):
        table.add_row(
            f"Filter {index}",
            escape(f"{settings.regex} ({settings.value_type_string or current_config.default_value_type})"),
        )
    console.print(table)


def cli_main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except (RuntimeError, OSError, ValueError) as e:
        logger.error("Unexpected error: %s", e)
        console.print(f"[red]Unexpected error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
