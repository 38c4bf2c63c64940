# ABOUTME: The `bookmatch match` command: pick the search result that is the target book.
# ABOUTME: Scores every result, shows the verdicts, and refuses to guess when nothing matches.

import json as json_lib
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from bookmatch.cli.options import json_option
from bookmatch.core.autoadd import DEFAULT_PREFERRED_FORMAT, select_download
from bookmatch.core.library import LibraryLoadError, load_search_results
from bookmatch.matching.engine import match_metadata
from bookmatch.matching.text import normalize_isbn
from bookmatch.matching.types import MatchTarget

console = Console()


def _build_target(title: str, authors: tuple[str, ...], isbn: str | None) -> MatchTarget:
    clean = normalize_isbn(isbn)
    return MatchTarget(
        title=title,
        authors=list(authors),
        isbn10=clean if len(clean) == 10 else None,
        isbn13=clean if len(clean) == 13 else None,
    )


@click.command("match")
@click.argument(
    "results_path",
    metavar="RESULTS",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--title", required=True, help="Title of the book being looked for.")
@click.option(
    "--author",
    "authors",
    multiple=True,
    help="Author of the book (repeat for several authors).",
)
@click.option("--isbn", default=None, help="ISBN-10 or ISBN-13 of the book.")
@click.option(
    "--format",
    "preferred_format",
    default=DEFAULT_PREFERRED_FORMAT,
    show_default=True,
    help="Prefer results in this format when any are available.",
)
@json_option
def match(
    results_path: Path,
    title: str,
    authors: tuple[str, ...],
    isbn: str | None,
    preferred_format: str,
    json_output: bool,
) -> None:
    """Find the search result in RESULTS (a JSON list) that matches the given book."""
    try:
        results = load_search_results(results_path)
    except LibraryLoadError as exc:
        raise click.ClickException(str(exc)) from exc

    target = _build_target(title, authors, isbn)
    decision = select_download(results, target, preferred_format)

    if json_output:
        data = {
            "found": decision.found,
            "message": decision.message,
            "candidate": decision.candidate.to_dict() if decision.candidate else None,
            "result": decision.result.to_dict() if decision.result else None,
        }
        click.echo(json_lib.dumps(data, indent=2))
        return

    if results:
        table = Table(title="Search Results")
        table.add_column("#", style="bold", width=3)
        table.add_column("Title")
        table.add_column("Author")
        table.add_column("Format")
        table.add_column("Type")
        table.add_column("Confidence", justify="right")

        for i, candidate in enumerate(results, start=1):
            row_result = match_metadata(candidate, target)
            chosen = candidate is decision.candidate
            table.add_row(
                str(i),
                f"[green]{candidate.title}[/green]" if chosen else candidate.title,
                candidate.author or "—",
                str(candidate.extra.get("format") or "—"),
                row_result.match_type.value,
                f"{row_result.confidence:.0%}",
            )
        console.print(table)

    best, verdict = decision.candidate, decision.result
    if best is None or verdict is None:
        console.print(f"[yellow]{decision.message}[/yellow]")
        return

    console.print(
        f"\n[bold]Best match:[/bold] {best.title}"
        f" by {best.author or 'Unknown Author'}"
        f" [dim]({verdict.match_type.value}, {verdict.confidence:.0%} confidence)[/dim]"
    )
