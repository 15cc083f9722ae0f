"""Command-line interface for rendering CSV and JSON data as text tables."""

from __future__ import annotations

import csv
import json
import logging
import sys
from typing import Any, TextIO

import click

from .border import BORDER_STYLES
from .config import (
    BORDER_ENV_VAR,
    COLUMN_WIDTH_ENV_VAR,
    TRUNCATION_INDICATOR_ENV_VAR,
    TableConfig,
)
from .exceptions import MonogridError
from .table import Table

logger = logging.getLogger(__name__)


def _parse_header_frequency(value: str) -> str | int | None:
    if value == "start":
        return "start"
    if value == "none":
        return None
    try:
        return int(value)
    except ValueError:
        raise click.BadParameter("expected 'start', 'none' or a positive integer") from None


def load_records(stream: TextIO, input_format: str) -> tuple[list[str], list[dict[str, Any]]]:
    """
    Read records from ``stream``.

    Args:
        stream: Open text stream
        input_format: "csv" (first row holds field names) or "json" (an
            array of objects)

    Returns:
        Tuple of (field names in first-seen order, records)
    """
    if input_format == "json":
        try:
            data = json.load(stream)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"Invalid JSON input: {e}") from None
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise click.ClickException("JSON input must be an array of objects")
        fields: dict[str, None] = {}
        for item in data:
            fields.update(dict.fromkeys(item))
        records = [{key: item.get(key, "") for key in fields} for item in data]
        logger.debug("Loaded %d JSON records with %d fields", len(records), len(fields))
        return list(fields), records

    reader = csv.DictReader(stream)
    records = list(reader)
    field_names = list(reader.fieldnames or [])
    logger.debug("Loaded %d CSV records with %d fields", len(records), len(field_names))
    return field_names, records


@click.group()
@click.version_option(package_name="monogrid")
def cli() -> None:
    """monogrid fixed-width table rendering CLI."""
    pass


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--format",
    "input_format",
    type=click.Choice(["csv", "json"]),
    default="csv",
    help="Input format (default: csv)",
)
@click.option(
    "--border",
    type=click.Choice(sorted(BORDER_STYLES)),
    default=None,
    help=f"Border preset (default: ${BORDER_ENV_VAR} or classic)",
)
@click.option(
    "--column-width",
    type=click.IntRange(min=1),
    default=None,
    help=(
        "Content width of each column, ignored with --pack "
        f"(default: ${COLUMN_WIDTH_ENV_VAR} or 8)"
    ),
)
@click.option(
    "--padding",
    type=click.IntRange(min=0),
    default=1,
    show_default=True,
    help="Padding characters on each side of a cell",
)
@click.option(
    "--header-frequency",
    default="start",
    show_default=True,
    help="'start', 'none' or N to repeat the header every N rows",
)
@click.option(
    "--row-divider-frequency",
    type=click.IntRange(min=1),
    default=None,
    help="Draw a rule between rows every N rows",
)
@click.option(
    "--wrap-body",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum lines per body row (default: unbounded)",
)
@click.option(
    "--wrap-header",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum lines for the header row (default: unbounded)",
)
@click.option(
    "--wrap-preserve",
    type=click.Choice(["rune", "word"]),
    default="rune",
    show_default=True,
    help="Wrap at any character or only between words",
)
@click.option(
    "--truncation-indicator",
    default=None,
    help=(
        "Marker shown where content was truncated "
        f"(default: ${TRUNCATION_INDICATOR_ENV_VAR} or ~)"
    ),
)
@click.option(
    "--pack/--no-pack",
    default=True,
    help="Size columns to fit their content (default: enabled)",
)
@click.option(
    "--max-width",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum table width when packing (default: terminal width)",
)
@click.option(
    "--transpose",
    is_flag=True,
    help="Swap rows and columns; each record's column is headed by its first field",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log debug output to stderr",
)
def render(
    source: TextIO,
    input_format: str,
    border: str | None,
    column_width: int | None,
    padding: int,
    header_frequency: str,
    row_divider_frequency: int | None,
    wrap_body: int | None,
    wrap_header: int | None,
    wrap_preserve: str,
    truncation_indicator: str | None,
    pack: bool,
    max_width: int | None,
    transpose: bool,
    verbose: bool,
) -> None:
    """Render CSV or JSON records as a text table."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            stream=sys.stderr,
        )

    field_names, records = load_records(source, input_format)

    # Options given on the command line take precedence over the environment
    overrides = {
        name: value
        for name, value in (
            ("border", border),
            ("column_width", column_width),
            ("truncation_indicator", truncation_indicator),
        )
        if value is not None
    }

    try:
        config = TableConfig.from_env(
            **overrides,
            column_padding=padding,
            header_frequency=_parse_header_frequency(header_frequency),
            row_divider_frequency=row_divider_frequency,
            wrap_body_cells_to=wrap_body,
            wrap_header_cells_to=wrap_header,
            wrap_preserve=wrap_preserve,
        )
        table = Table(records, *field_names, config=config)
        if transpose:
            # Records become columns headed by their first field
            table = table.transpose(
                headers=lambda record: str(record[field_names[0]]) if field_names else ""
            )
        if pack:
            table.pack(max_width if max_width is not None else "auto")
    except MonogridError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    output = str(table)
    if output:
        click.echo(output)


@cli.command()
def borders() -> None:
    """List available border presets."""
    for name in sorted(BORDER_STYLES):
        click.echo(name)


if __name__ == "__main__":
    cli()
