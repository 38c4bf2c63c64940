# ABOUTME: Unit tests for the Google Books recommendation source.
# ABOUTME: Covers volume parsing, query construction, and API key error reporting.

import pytest

from bookmatch.sources.google_books import GoogleBooksSource, parse_volume
from bookmatch.sources.http import CatalogFetchError
from bookmatch.sources.provider import RecommendationSource
from tests.fixtures.fake_http import FakeHttpClient
from tests.fixtures.google_books_responses import (
    VOLUME_FULL,
    VOLUME_MINIMAL,
    VOLUME_MULTI_AUTHOR,
    VOLUMES_BY_AUTHOR,
    VOLUMES_EMPTY,
)


class TestParseVolume:
    """Tests for parse_volume."""

    def test_full_volume(self) -> None:
        item = parse_volume(VOLUME_FULL)
        assert item.source_id == "gb-wyrd"
        assert item.title == "Wyrd Sisters"
        assert item.author == "Terry Pratchett"
        assert item.publisher == "Harper"
        assert item.published_date == "2001-02-01"
        assert item.description == "Three witches and a stolen crown."
        assert item.categories == ["Fiction / Fantasy / Humorous"]
        assert item.page_count == 288
        assert item.average_rating == 4.5
        assert item.reason is None

    def test_first_isbn_identifier_in_listed_order(self) -> None:
        """OTHER identifiers are skipped; the first ISBN listed wins."""
        assert parse_volume(VOLUME_FULL).isbn == "0061020664"

    def test_thumbnail_upgraded_to_https(self) -> None:
        assert parse_volume(VOLUME_FULL).cover_url == "https://books.google.com/thumb"

    def test_minimal_volume(self) -> None:
        item = parse_volume(VOLUME_MINIMAL)
        assert item.title == "An Untitled Manuscript"
        assert item.author == "Unknown Author"
        assert item.isbn is None
        assert item.cover_url is None
        assert item.average_rating is None
        assert item.categories is None

    def test_multiple_authors_joined(self) -> None:
        item = parse_volume(VOLUME_MULTI_AUTHOR)
        assert item.author == "Terry Pratchett, Neil Gaiman"
        assert item.isbn == "9780060853983"

    def test_integer_rating_becomes_float(self) -> None:
        rating = parse_volume(VOLUME_MULTI_AUTHOR).average_rating
        assert rating == 4.0
        assert isinstance(rating, float)


class TestGoogleBooksSource:
    """Tests for GoogleBooksSource queries."""

    def test_satisfies_protocol(self) -> None:
        source = GoogleBooksSource(FakeHttpClient(), api_key="k")
        assert isinstance(source, RecommendationSource)
        assert source.name == "googlebooks"

    def test_search_by_author(self) -> None:
        client = FakeHttpClient({"/books/v1/volumes": VOLUMES_BY_AUTHOR})
        source = GoogleBooksSource(client, api_key="secret")
        items = source.search_by_author("Terry Pratchett")

        assert [i.source_id for i in items] == ["gb-wyrd", "gb-small-gods", "gb-omens"]
        assert client.params_log == [
            {"q": 'inauthor:"Terry Pratchett"', "maxResults": "10", "key": "secret"}
        ]

    def test_search_by_subject(self) -> None:
        client = FakeHttpClient({"/books/v1/volumes": VOLUMES_BY_AUTHOR})
        source = GoogleBooksSource(client, api_key="secret")
        source.search_by_subject("Fantasy", max_results=5)

        params = client.params_log[0]
        assert params is not None
        assert params["q"] == 'subject:"Fantasy"'
        assert params["maxResults"] == "5"

    def test_no_items(self) -> None:
        client = FakeHttpClient({"/books/v1/volumes": VOLUMES_EMPTY})
        assert GoogleBooksSource(client, api_key="k").search_by_author("Nobody") == []

    def test_forbidden_reports_bad_key(self) -> None:
        client = FakeHttpClient(
            {"/books/v1/volumes": CatalogFetchError("HTTP 403", status_code=403)}
        )
        source = GoogleBooksSource(client, api_key="bad")
        with pytest.raises(CatalogFetchError, match="Invalid or unauthorized") as exc_info:
            source.search_by_author("Terry Pratchett")
        assert exc_info.value.status_code == 403

    def test_other_errors_propagate_unchanged(self) -> None:
        error = CatalogFetchError("HTTP 500 after 4 attempts", status_code=500)
        client = FakeHttpClient({"/books/v1/volumes": error})
        source = GoogleBooksSource(client, api_key="k")
        with pytest.raises(CatalogFetchError) as exc_info:
            source.search_by_subject("Fantasy")
        assert exc_info.value is error
