"""Filter evaluation CLI commands."""

from pathlib import Path
from typing import List, Optional
import typer
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from ...catalog import Catalog, load_catalog
from ...core.config import get_config
from ...core.enums import SelectionOutcome
from ...core.errors import JobFilterError
from ...core.log import get_logger
from ...core.types import RegexFilterSettings
from ...filters.regex_filter import RegexJobFilter
from ...filters.selector import Selector, SelectionResult
from ...filters.validation import check_regex
from ...utils.codec import to_json_string

console = Console()
logger = get_logger(__name__)
filter_app = typer.Typer(help="Evaluate regex job filters")


_HELP = {
    "catalog": "YAML or JSON catalog of folders, jobs and builds",
    "regex": "Pattern that the whole candidate string must match",
    "value_type": "Value source: NAME, FOLDER_NAME or BUILD_VERSION",
    "mode": "Include/exclude mode tag recorded with the filter",
    "match_name": "Test simple names",
    "match_full_name": "Test full names",
    "match_display_name": "Test display names",
    "match_full_display_name": "Test full display names",
    "recurse": "Evaluate nested items too, not only top level ones",
    "only_matched": "List matching items only",
}


class FilterCommandOptions(BaseModel):
    """Pydantic model for the options that define one filter."""

    regex: str = Field(description=_HELP["regex"])
    value_type: Optional[str] = Field(None, description=_HELP["value_type"])
    mode: Optional[str] = Field(None, description=_HELP["mode"])
    match_name: bool = Field(False, description=_HELP["match_name"])
    match_full_name: bool = Field(False, description=_HELP["match_full_name"])
    match_display_name: bool = Field(False, description=_HELP["match_display_name"])
    match_full_display_name: bool = Field(
        False, description=_HELP["match_full_display_name"]
    )

    def to_settings(self, default_value_type: str) -> RegexFilterSettings:
        """Persisted filter form of these options."""
        return RegexFilterSettings(
            regex=self.regex,
            include_exclude_type_string=self.mode,
            value_type_string=self.value_type or default_value_type,
            match_name=self.match_name,
            match_full_name=self.match_full_name,
            match_display_name=self.match_display_name,
            match_full_display_name=self.match_full_display_name,
        )


class MatchCommandOptions(FilterCommandOptions):
    """Pydantic model for match command options."""

    catalog: Path = Field(description=_HELP["catalog"])
    recurse: bool = Field(False, description=_HELP["recurse"])
    only_matched: bool = Field(False, description=_HELP["only_matched"])


@filter_app.command("check")
def check(regex: str = typer.Argument(help="Pattern to validate")) -> None:
    """Validate a regular expression."""
    validation = check_regex(regex)
    if validation.ok:
        console.print("[green]OK[/green]")
        return
    console.print(f"[red]Invalid pattern: {escape(validation.message or '')}[/red]")
    raise typer.Exit(1)


@filter_app.command("match")
def match(
    catalog: Path = typer.Argument(help=_HELP["catalog"]),
    regex: str = typer.Option(..., "--regex", "-r", help=_HELP["regex"]),
    value_type: Optional[str] = typer.Option(
        None, "--value-type", "-t", help=_HELP["value_type"]
    ),
    mode: Optional[str] = typer.Option(None, "--mode", help=_HELP["mode"]),
    match_name: bool = typer.Option(False, "--match-name", help=_HELP["match_name"]),
    match_full_name: bool = typer.Option(
        False, "--match-full-name", help=_HELP["match_full_name"]
    ),
    match_display_name: bool = typer.Option(
        False, "--match-display-name", help=_HELP["match_display_name"]
    ),
    match_full_display_name: bool = typer.Option(
        False, "--match-full-display-name", help=_HELP["match_full_display_name"]
    ),
    recurse: bool = typer.Option(False, "--recurse", help=_HELP["recurse"]),
    only_matched: bool = typer.Option(
        False, "--only-matched", help=_HELP["only_matched"]
    ),
) -> None:
    """Evaluate one filter against a catalog."""
    options = MatchCommandOptions(
        catalog=catalog,
        regex=regex,
        value_type=value_type,
        mode=mode,
        match_name=match_name,
        match_full_name=match_full_name,
        match_display_name=match_display_name,
        match_full_display_name=match_full_display_name,
        recurse=recurse,
        only_matched=only_matched,
    )
    try:
        settings = options.to_settings(get_config().default_value_type)
        job_filter = RegexJobFilter.restore(settings)
        loaded = load_catalog(options.catalog)
    except JobFilterError as e:
        logger.error("Match failed: %s", e.message)
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    result = _select(job_filter, loaded, options.recurse)
    _display_result(job_filter, result, options.only_matched)


@filter_app.command("export")
def export(
    regex: str = typer.Option(..., "--regex", "-r", help=_HELP["regex"]),
    value_type: Optional[str] = typer.Option(
        None, "--value-type", "-t", help=_HELP["value_type"]
    ),
    mode: Optional[str] = typer.Option(None, "--mode", help=_HELP["mode"]),
    match_name: bool = typer.Option(False, "--match-name", help=_HELP["match_name"]),
    match_full_name: bool = typer.Option(
        False, "--match-full-name", help=_HELP["match_full_name"]
    ),
    match_display_name: bool = typer.Option(
        False, "--match-display-name", help=_HELP["match_display_name"]
    ),
    match_full_display_name: bool = typer.Option(
        False, "--match-full-display-name", help=_HELP["match_full_display_name"]
    ),
) -> None:
    """Print the persisted JSON form of a filter."""
    options = FilterCommandOptions(
        regex=regex,
        value_type=value_type,
        mode=mode,
        match_name=match_name,
        match_full_name=match_full_name,
        match_display_name=match_display_name,
        match_full_display_name=match_full_display_name,
    )
    try:
        job_filter = RegexJobFilter.restore(
            options.to_settings(get_config().default_value_type)
        )
        document = to_json_string(job_filter.to_settings())
    except JobFilterError as e:
        logger.error("Export failed: %s", e.message)
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    # Plain output so the JSON can be redirected to a file
    typer.echo(document)


@filter_app.command("run")
def run(
    catalog: Path = typer.Argument(help=_HELP["catalog"]),
    recurse: bool = typer.Option(False, "--recurse", help=_HELP["recurse"]),
    only_matched: bool = typer.Option(
        False, "--only-matched", help=_HELP["only_matched"]
    ),
) -> None:
    """Evaluate every filter defined in the configuration file."""
    try:
        config = get_config()
        loaded = load_catalog(catalog)
        filters: List[RegexJobFilter] = []
        for settings in config.filters:
            if settings.value_type_string is None:
                settings = settings.model_copy(
                    update={"value_type_string": config.default_value_type}
                )
            filters.append(RegexJobFilter.restore(settings))
    except JobFilterError as e:
        logger.error("Run failed: %s", e.message)
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)

    if not filters:
        console.print("[yellow]No filters configured[/yellow]")
        return

    for job_filter in filters:
        result = _select(job_filter, loaded, recurse)
        _display_result(job_filter, result, only_matched)


def _select(job_filter: RegexJobFilter, catalog: Catalog, recurse: bool) -> SelectionResult:
    items = catalog.all_items() if recurse else catalog.top_level_items
    return Selector(job_filter).select(items)


def _display_result(
    job_filter: RegexJobFilter, result: SelectionResult, only_matched: bool
) -> None:
    title = f"{job_filter.regex} ({job_filter.value_type.value})"
    if job_filter.include_exclude_type_string:
        title += f" mode={job_filter.include_exclude_type_string}"
    table = Table(title=escape(title))
    table.add_column("Item", style="cyan")
    table.add_column("Display Name")
    table.add_column("Verdict")
    for item, outcome in result.outcomes:
        if only_matched and outcome != SelectionOutcome.MATCHED:
            continue
        style = "green" if outcome == SelectionOutcome.MATCHED else "dim"
        table.add_row(
            escape(item.full_name), escape(item.display_name or ""),
            f"[{style}]{outcome.value}[/{style}]")
    console.print(table)
    console.print(
        f"{result.matched_count}/{result.total} matched ({result.match_rate:.1f}%)"
    )
