# ABOUTME: The `bookmatch profile` command for showing the reading profile of a library.
# ABOUTME: Lists favorite authors, top genres/tags, and preferred series.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bookmatch.cli.options import json_option, library_argument, read_library
from bookmatch.recommend.profile import analyze_library

console = Console()


@click.command("profile")
@library_argument
@json_option
def profile(library_path: Path, json_output: bool) -> None:
    """Show the reading profile inferred from LIBRARY."""
    books, audiobooks = read_library(library_path)
    result = analyze_library(books, audiobooks)

    if json_output:
        click.echo(json_lib.dumps(result.to_dict(), indent=2))
        return

    table = Table(title="Reading Profile")
    table.add_column("Signal", style="bold")
    table.add_column("Values")

    rows = [
        ("Favorite authors", result.favorite_authors),
        ("Top genres", result.top_genres),
        ("Preferred series", result.preferred_series),
    ]
    for label, values in rows:
        table.add_row(label, ", ".join(values) if values else "[dim]none[/dim]")

    console.print(table)
    console.print(
        f"\n[dim]{len(books)} book(s), {len(audiobooks)} audiobook(s) analyzed[/dim]"
    )
