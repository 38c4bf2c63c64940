# ABOUTME: Shared Click options and helpers for Bookmatch CLI commands.
# ABOUTME: Provides the library-file argument, the --json flag, and library loading.

from pathlib import Path

import click

from bookmatch.core.library import LibraryLoadError, load_library
from bookmatch.recommend.types import LibraryItem

library_argument = click.argument(
    "library_path",
    metavar="LIBRARY",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)

json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON.",
)


def read_library(path: Path) -> tuple[list[LibraryItem], list[LibraryItem]]:
    """Load the library file, turning load errors into a clean CLI failure."""
    try:
        return load_library(path)
    except LibraryLoadError as exc:
        raise click.ClickException(str(exc)) from exc
