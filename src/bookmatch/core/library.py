# ABOUTME: Loads owned-library and search-result records from JSON files.
# ABOUTME: The storage layer exports these; the engine only ever sees plain records.

import json
from pathlib import Path
from typing import Any

from bookmatch.matching.types import MatchCandidate
from bookmatch.recommend.types import LibraryItem


class LibraryLoadError(Exception):
    """Raised when a library or search-result file cannot be read or parsed."""


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise LibraryLoadError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise LibraryLoadError(f"Invalid JSON in {path}: {exc}") from exc


def _parse_items(records: Any, section: str, path: Path) -> list[LibraryItem]:
    if not isinstance(records, list):
        raise LibraryLoadError(f"'{section}' in {path} must be a list")
    items = []
    for i, record in enumerate(records):
        if not isinstance(record, dict) or not record.get("title"):
            raise LibraryLoadError(f"{section}[{i}] in {path} needs a title")
        items.append(LibraryItem.from_dict(record))
    return items


def load_library(path: Path) -> tuple[list[LibraryItem], list[LibraryItem]]:
    """Load the owned library from a JSON document.

    Expected shape: ``{"books": [...], "audiobooks": [...]}``; either key may
    be absent. Each record needs a title and may carry author, isbn, tags,
    series, and id.

    Returns:
        (books, audiobooks)

    Raises:
        LibraryLoadError: If the file is unreadable or malformed.
    """
    data = _read_json(path)
    if not isinstance(data, dict):
        raise LibraryLoadError(f"{path} must contain a JSON object")
    books = _parse_items(data.get("books", []), "books", path)
    audiobooks = _parse_items(data.get("audiobooks", []), "audiobooks", path)
    return books, audiobooks


def load_search_results(path: Path) -> list[MatchCandidate]:
    """Load external catalog search results (a JSON list of records) as candidates."""
    data = _read_json(path)
    if not isinstance(data, list):
        raise LibraryLoadError(f"{path} must contain a JSON list of search results")
    candidates = []
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            raise LibraryLoadError(f"Search result {i} in {path} is not an object")
        candidates.append(MatchCandidate.from_dict(record))
    return candidates
