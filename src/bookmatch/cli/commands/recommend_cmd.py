# ABOUTME: The `bookmatch recommend` command for personalized recommendations.
# ABOUTME: Profiles the library, pulls candidates from Google Books, and prints the ranked list.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bookmatch.cli.options import json_option, library_argument, read_library
from bookmatch.recommend.diversify import DEFAULT_MAX_PER_AUTHOR
from bookmatch.recommend.engine import DEFAULT_RECOMMENDATION_LIMIT, recommend as run_pipeline
from bookmatch.sources.google_books import GoogleBooksSource
from bookmatch.sources.http import CatalogHttpClient
from bookmatch.sources.provider import RecommendationSource

console = Console()


def _create_source(api_key: str) -> RecommendationSource:
    """Create the default recommendation source (Google Books)."""
    return GoogleBooksSource(http_client=CatalogHttpClient(), api_key=api_key)


@click.command("recommend")
@library_argument
@click.option(
    "--api-key",
    envvar="BOOKMATCH_GOOGLE_BOOKS_API_KEY",
    default=None,
    help="Google Books API key (or set BOOKMATCH_GOOGLE_BOOKS_API_KEY).",
)
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=DEFAULT_RECOMMENDATION_LIMIT,
    show_default=True,
    help="Maximum number of recommendations to show.",
)
@click.option(
    "--max-per-author",
    type=click.IntRange(min=1),
    default=DEFAULT_MAX_PER_AUTHOR,
    show_default=True,
    help="Books per author before the rest are pushed to the end.",
)
@json_option
def recommend(
    library_path: Path,
    api_key: str | None,
    limit: int,
    max_per_author: int,
    json_output: bool,
) -> None:
    """Recommend books for the library in LIBRARY."""
    if not api_key:
        raise click.UsageError(
            "Google Books API key not configured. "
            "Pass --api-key or set BOOKMATCH_GOOGLE_BOOKS_API_KEY."
        )

    books, audiobooks = read_library(library_path)
    source = _create_source(api_key)
    run = run_pipeline(
        books, audiobooks, source, max_per_author=max_per_author, limit=limit
    )

    if json_output:
        data = {
            "cache_key": run.cache_key,
            "profile": run.profile.to_dict(),
            "recommendations": [rec.to_dict() for rec in run.recommendations],
        }
        click.echo(json_lib.dumps(data, indent=2))
        return

    if not run.recommendations:
        console.print("[yellow]No recommendations found.[/yellow]")
        if not run.profile.favorite_authors and not run.profile.top_genres:
            console.print(
                "[dim]Add more books with authors or tags to build a reading profile.[/dim]"
            )
        return

    table = Table(title="Recommendations")
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Rating", justify="right", width=6)
    table.add_column("Why")

    for i, rec in enumerate(run.recommendations, start=1):
        rating = f"{rec.average_rating:.1f}" if rec.average_rating is not None else "—"
        table.add_row(str(i), rec.title, rec.author, rating, rec.reason or "")

    console.print(table)
    console.print(
        f"\n[dim]{len(run.recommendations)} of {run.fetched_count} candidate(s) shown[/dim]"
    )
