# ABOUTME: Open Library series metadata source.
# ABOUTME: Finds a work record and reads its "series:" subject, falling back to title patterns.

import logging
from typing import Any

from bookmatch.sources.http import CatalogFetchError, HttpClient
from bookmatch.sources.series import (
    SeriesMetadata,
    extract_book_number,
    series_from_title_pattern,
)

logger = logging.getLogger(__name__)

_OL_BASE = "https://openlibrary.org"
_SEARCH_LIMIT = 5
_SEARCH_FIELDS = "key,title,author_name,first_publish_year"
_SERIES_SUBJECT_PREFIX = "series:"


def parse_series_subject(subjects: list[str]) -> str | None:
    """Extract a series name from Open Library subjects.

    Open Library tags series as "series:Name_Of_Series". The first such
    subject wins; underscores become spaces and each word is capitalized.
    """
    for subject in subjects:
        if not subject.lower().startswith(_SERIES_SUBJECT_PREFIX):
            continue
        raw = subject[len(_SERIES_SUBJECT_PREFIX) :].replace("_", " ")
        words = [w[:1].upper() + w[1:].lower() for w in raw.split(" ")]
        return " ".join(words).strip()
    return None


def _works_path(key: str) -> str:
    return key if key.startswith("/works/") else f"/works/{key}"


class OpenLibrarySeriesSource:
    """Series lookups against the Open Library search and works endpoints.

    Uses dependency-injected HttpClient for testability.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return "openlibrary"

    def get_work_details(self, work_key: str) -> dict[str, Any] | None:
        """Fetch a works record, or None if the request fails."""
        try:
            return self._http.get(f"{_OL_BASE}{_works_path(work_key)}.json")
        except CatalogFetchError as exc:
            logger.warning("Work lookup failed for %s: %s", work_key, exc)
            return None

    def fetch_series_metadata(self, title: str, author: str | None = None) -> SeriesMetadata:
        """Determine the series a book belongs to.

        Confidence is "high" when Open Library names the series and the title
        carries a book number, "medium" when only the series is known. Any
        miss or fetch failure falls back to a "low" confidence guess from the
        title alone.
        """
        query = f'title:"{title}"'
        if author:
            query += f' author:"{author}"'
        params = {"q": query, "limit": str(_SEARCH_LIMIT), "fields": _SEARCH_FIELDS}

        try:
            data = self._http.get(f"{_OL_BASE}/search.json", params=params)
        except CatalogFetchError as exc:
            logger.warning("Series search failed for %r: %s", title, exc)
            return series_from_title_pattern(title)

        docs = data.get("docs", [])
        if not docs:
            logger.debug("No Open Library results for %r", title)
            return series_from_title_pattern(title)

        best = docs[0]
        work_key = best.get("key")
        if not work_key:
            return series_from_title_pattern(title)
        logger.debug("Found match: %r (%s)", best.get("title"), work_key)

        details = self.get_work_details(work_key)
        series_name = parse_series_subject((details or {}).get("subjects") or [])
        if series_name:
            book_number = extract_book_number(title)
            return SeriesMetadata(
                series_name=series_name,
                series_index=book_number,
                confidence="high" if book_number else "medium",
                source="openlibrary",
            )

        return series_from_title_pattern(title)
