"""Command-line interface for stockmeta."""
from __future__ import annotations

import functools
import json
import logging
import sys
from typing import Any, Callable, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stockmeta import __version__
from stockmeta.core.counter import count_input
from stockmeta.core.csv_encoder import (
    DEFAULT_CSV_NAME,
    DEFAULT_FILENAME,
    encode_csv,
    write_csv,
)
from stockmeta.core.formatter import format_metadata
from stockmeta.models.config import FormatConfig
from stockmeta.models.result import RawInput
from stockmeta.utils.logging import get_logger, set_log_level

console = Console()
logger = get_logger("cli")

PRESETS: dict[str, Callable[[], FormatConfig]] = {
    "adobe": FormatConfig.for_adobe_stock,
    "shutterstock": FormatConfig.for_shutterstock,
}


def metadata_options(func: Callable) -> Callable:
    """Attach the input and formatting options shared by every command."""
    options = [
        click.option("-t", "--title", default="", help="Raw title"),
        click.option("-k", "--keywords", default="", help="Comma-separated keywords"),
        click.option("--max-tags", help="Maximum number of keywords (default 50)"),
        click.option(
            "--max-title-length",
            help="Maximum title length in characters (default 200)",
        ),
        click.option("--prefix", help="Text placed before the title"),
        click.option("--suffix", help="Text placed after the title"),
        click.option(
            "--negative-keywords",
            help="Comma-separated keywords to drop (exact match)",
        ),
        click.option(
            "--negative-title-words",
            help="Comma-separated words to strip from the title",
        ),
        click.option(
            "--preset",
            type=click.Choice(sorted(PRESETS)),
            help="Start from a marketplace preset",
        ),
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True, dir_okay=False),
            help="JSON file with formatting settings",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_config(
    max_tags: Optional[str],
    max_title_length: Optional[str],
    prefix: Optional[str],
    suffix: Optional[str],
    negative_keywords: Optional[str],
    negative_title_words: Optional[str],
    preset: Optional[str],
    config_path: Optional[str],
) -> FormatConfig:
    """Start from a preset or config file, then apply command-line values."""
    base = PRESETS[preset]() if preset else FormatConfig()

    if config_path:
        try:
            base = FormatConfig.from_json_file(config_path)
        except (OSError, ValueError) as e:
            logger.error("Cannot load config %s: %s", config_path, e)
            console.print(f"[red]Error: invalid config file {escape(config_path)}[/red]")
            sys.exit(1)

    overrides: dict[str, Any] = {
        key: value
        for key, value in {
            "max_tags": max_tags,
            "max_title_length": max_title_length,
            "prefix": prefix,
            "suffix": suffix,
            "negative_keywords": negative_keywords,
            "negative_title_words": negative_title_words,
        }.items()
        if value is not None
    }
    # Re-validate so overrides go through the same defaulting rules
    return FormatConfig.model_validate({**base.model_dump(), **overrides})


def _with_config(func: Callable) -> Callable:
    """Collapse the shared options into ``raw`` and ``config`` arguments."""
    @functools.wraps(func)
    def wrapper(
        title: str,
        keywords: str,
        max_tags: Optional[str],
        max_title_length: Optional[str],
        prefix: Optional[str],
        suffix: Optional[str],
        negative_keywords: Optional[str],
        negative_title_words: Optional[str],
        preset: Optional[str],
        config_path: Optional[str],
        **kwargs: Any,
    ) -> Any:
        config = _build_config(
            max_tags,
            max_title_length,
            prefix,
            suffix,
            negative_keywords,
            negative_title_words,
            preset,
            config_path,
        )
        raw = RawInput(title=title, keywords_csv=keywords)
        return func(raw=raw, config=config, **kwargs)
    return wrapper


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="stockmeta")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """stockmeta - Title and keyword formatting for stock-media submissions."""
    if verbose:
        set_log_level(logging.DEBUG)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="format")
@metadata_options
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@_with_config
def format_cmd(raw: RawInput, config: FormatConfig, as_json: bool) -> None:
    """Clean a title and keyword list.

    Example:

        stockmeta format -t "Red Car for sale" -k "car, red, cheap" --negative-title-words car
    """
    result = format_metadata(raw, config)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
    else:
        click.echo(result.title)
        click.echo(result.keywords_text)


@cli.command(name="csv")
@metadata_options
@click.option("-c", "--category", default="", help="Asset category")
@click.option(
    "--filename",
    default=DEFAULT_FILENAME,
    show_default=True,
    help="Value of the Filename column",
)
@click.option(
    "-o", "--output",
    default=DEFAULT_CSV_NAME,
    show_default=True,
    help="Output file path, or - for stdout",
)
@_with_config
def csv_cmd(
    raw: RawInput,
    config: FormatConfig,
    category: str,
    filename: str,
    output: str,
) -> None:
    """Format input and export it as a metadata CSV.

    Examples:

        stockmeta csv -t "Sunset" -k "sun, sea" -c Photos

        stockmeta csv -t "Sunset" -k "sun, sea" -o -
    """
    result = format_metadata(raw, config)

    if output == "-":
        click.echo(encode_csv(result, category, filename))
        return

    try:
        path = write_csv(result, category, filename, output)
    except OSError as e:
        logger.error("Failed to write %s: %s", output, e)
        console.print(f"[red]Error: cannot write {output}: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[green]Output written to {path}[/green]")


@cli.command(name="count")
@metadata_options
@_with_config
def count_cmd(raw: RawInput, config: FormatConfig) -> None:
    """Show title length and tag count of the input as typed."""
    counts = count_input(raw, config)

    table = Table(title="Input Counters")
    table.add_column("Field", style="cyan")
    table.add_column("Count")

    table.add_row(
        "Title",
        f"[red]{counts.title_label}[/red]" if counts.title_over_limit else counts.title_label,
    )
    table.add_row(
        "Keywords",
        f"[red]{counts.tags_label}[/red]" if counts.tags_over_limit else counts.tags_label,
    )

    console.print(table)


if __name__ == "__main__":
    cli()
