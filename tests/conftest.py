# ABOUTME: Shared pytest fixtures for Bookmatch tests.
# ABOUTME: Provides sample owned-library items, recommendation items, and JSON files on disk.

import json
from pathlib import Path

import pytest

from bookmatch.recommend.types import LibraryItem


@pytest.fixture
def fixtures_dir() -> Path:
    """Path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_books() -> list[LibraryItem]:
    """A small owned library with one clear favorite author and a series."""
    return [
        LibraryItem(
            id="b1",
            title="Good Omens",
            author="Terry Pratchett, Neil Gaiman",
            isbn="9780060853983",
            tags=["Fantasy", "Humor"],
        ),
        LibraryItem(
            id="b2",
            title="American Gods",
            author="Neil Gaiman",
            tags=["Fantasy", "Mythology"],
        ),
        LibraryItem(
            id="b3",
            title="Guards! Guards!",
            author="Terry Pratchett",
            tags=["Fantasy", "Humor"],
            series="Discworld",
        ),
        LibraryItem(
            id="b4",
            title="Dune",
            author="Frank Herbert",
            isbn="9780441013593",
            tags=["Science Fiction"],
            series="Dune",
        ),
    ]


@pytest.fixture
def sample_audiobooks() -> list[LibraryItem]:
    """Audiobooks that reinforce the favorites of the sample library."""
    return [
        LibraryItem(
            id="a1",
            title="Mort",
            author="Terry Pratchett",
            tags=["Fantasy"],
            series="Discworld",
        ),
    ]


@pytest.fixture
def library_file(
    tmp_path: Path, sample_books: list[LibraryItem], sample_audiobooks: list[LibraryItem]
) -> Path:
    """The sample library written as a JSON export."""

    def _record(item: LibraryItem) -> dict:
        return {
            "id": item.id,
            "title": item.title,
            "author": item.author,
            "isbn": item.isbn,
            "tags": item.tags,
            "series": item.series,
        }

    data = {
        "books": [_record(b) for b in sample_books],
        "audiobooks": [_record(a) for a in sample_audiobooks],
    }
    path = tmp_path / "library.json"
    path.write_text(json.dumps(data))
    return path


@pytest.fixture
def search_results_file(tmp_path: Path) -> Path:
    """Search results for "The Hobbit" in mixed formats, including look-alikes."""
    data = [
        {"id": "md5-1", "title": "The Hobbit Companion", "author": "David Day", "format": "epub"},
        {"id": "md5-2", "title": "The Hobbit", "author": "J.R.R. Tolkien", "format": "pdf"},
        {"id": "md5-3", "title": "The Hobbit", "author": "Tolkien, J. R. R.", "format": "epub"},
        {
            "id": "md5-4",
            "title": "The Hobbit: An Unexpected Journey",
            "author": "Movie Tie-In",
            "format": "epub",
        },
    ]
    path = tmp_path / "results.json"
    path.write_text(json.dumps(data))
    return path
