# ABOUTME: The `bookmatch series` command for filling in series metadata.
# ABOUTME: Looks up each item's series on Open Library in rate-limited concurrent batches.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bookmatch.cli.options import json_option, library_argument, read_library
from bookmatch.sources.http import CatalogHttpClient
from bookmatch.sources.openlibrary import OpenLibrarySeriesSource
from bookmatch.sources.provider import SeriesSource
from bookmatch.sources.series import batch_fetch_series_metadata

console = Console()

_CONFIDENCE_STYLES = {"high": "green", "medium": "yellow", "low": "dim"}


def _create_source() -> SeriesSource:
    """Create the default series source (Open Library, one attempt per request)."""
    return OpenLibrarySeriesSource(http_client=CatalogHttpClient(max_retries=0))


@click.command("series")
@library_argument
@click.option(
    "--all",
    "include_all",
    is_flag=True,
    default=False,
    help="Look up every item, not only those without a series.",
)
@json_option
def series(library_path: Path, include_all: bool, json_output: bool) -> None:
    """Look up series names and positions for items in LIBRARY."""
    books, audiobooks = read_library(library_path)
    items = [*books, *audiobooks]
    if not include_all:
        items = [item for item in items if not item.series]

    if not items:
        console.print("[green]Every item already has a series.[/green]")
        return

    source = _create_source()
    if json_output:
        results = batch_fetch_series_metadata(items, source)
    else:
        with console.status(f"Looking up series for {len(items)} item(s)..."):
            results = batch_fetch_series_metadata(items, source)

    rows = list(zip(items, results))

    if json_output:
        data = [
            {"id": item.id, "title": item.title, **meta.to_dict()} for item, meta in rows
        ]
        click.echo(json_lib.dumps(data, indent=2))
        return

    table = Table(title="Series Metadata")
    table.add_column("Title", style="bold")
    table.add_column("Series")
    table.add_column("#", justify="right", width=4)
    table.add_column("Confidence")
    table.add_column("Source", style="dim")

    for item, meta in rows:
        style = _CONFIDENCE_STYLES[meta.confidence]
        table.add_row(
            item.title,
            meta.series_name or "[dim]—[/dim]",
            str(meta.series_index) if meta.series_index is not None else "—",
            f"[{style}]{meta.confidence}[/{style}]",
            meta.source,
        )

    console.print(table)
    found = sum(1 for _, meta in rows if meta.series_name)
    console.print(f"\n[dim]{found} of {len(rows)} item(s) matched to a series[/dim]")
