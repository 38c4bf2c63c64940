# ABOUTME: Google Books recommendation source.
# ABOUTME: Searches volumes by author or subject and converts them into RecommendationItems.

import logging
from typing import Any

from bookmatch.recommend.types import RecommendationItem
from bookmatch.sources.http import CatalogFetchError, HttpClient

logger = logging.getLogger(__name__)

_GB_VOLUMES_URL = "https://www.googleapis.com/books/v1/volumes"
_UNKNOWN_AUTHOR = "Unknown Author"
_ISBN_TYPES = ("ISBN_13", "ISBN_10")


def parse_volume(volume: dict[str, Any]) -> RecommendationItem:
    """Convert a Google Books volume resource into a RecommendationItem.

    Takes the first ISBN-13 or ISBN-10 identifier in listed order, joins the
    authors, and upgrades the thumbnail URL to https.
    """
    info = volume.get("volumeInfo", {})

    isbn = None
    for identifier in info.get("industryIdentifiers", []):
        if identifier.get("type") in _ISBN_TYPES:
            isbn = identifier.get("identifier")
            break

    authors = info.get("authors") or []
    thumbnail = (info.get("imageLinks") or {}).get("thumbnail")
    if thumbnail:
        thumbnail = thumbnail.replace("http:", "https:", 1)

    rating = info.get("averageRating")
    return RecommendationItem(
        source_id=volume.get("id", ""),
        title=info.get("title", "Unknown"),
        author=", ".join(authors) if authors else _UNKNOWN_AUTHOR,
        description=info.get("description"),
        cover_url=thumbnail,
        isbn=isbn,
        published_date=info.get("publishedDate"),
        publisher=info.get("publisher"),
        categories=info.get("categories"),
        average_rating=float(rating) if rating is not None else None,
        page_count=info.get("pageCount"),
    )


class GoogleBooksSource:
    """Recommendation source backed by the Google Books volumes API.

    Requires the user's API key. Uses a dependency-injected HttpClient for
    testability.
    """

    def __init__(self, http_client: HttpClient, api_key: str) -> None:
        self._http = http_client
        self._api_key = api_key

    @property
    def name(self) -> str:
        return "googlebooks"

    def search(self, query: str, max_results: int = 10) -> list[RecommendationItem]:
        """Run a volumes query and return the parsed items.

        Raises:
            CatalogFetchError: When the request fails. A 403 is reported as an
                invalid or unauthorized API key.
        """
        params = {"q": query, "maxResults": str(max_results), "key": self._api_key}
        try:
            data = self._http.get(_GB_VOLUMES_URL, params=params)
        except CatalogFetchError as exc:
            if exc.status_code == 403:
                raise CatalogFetchError(
                    "Invalid or unauthorized Google Books API key", status_code=403
                ) from exc
            raise

        items = [parse_volume(v) for v in data.get("items", [])]
        logger.debug("Google Books query %r returned %d item(s)", query, len(items))
        return items

    def search_by_author(self, author: str, max_results: int = 10) -> list[RecommendationItem]:
        return self.search(f'inauthor:"{author}"', max_results)

    def search_by_subject(self, subject: str, max_results: int = 10) -> list[RecommendationItem]:
        return self.search(f'subject:"{subject}"', max_results)
