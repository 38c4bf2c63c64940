# ABOUTME: Protocols for the external catalogs the recommendation and series flows depend on.
# ABOUTME: Google Books and Open Library implement these; tests substitute in-memory fakes.

from typing import Protocol, runtime_checkable

from bookmatch.recommend.types import RecommendationItem
from bookmatch.sources.series import SeriesMetadata


@runtime_checkable
class RecommendationSource(Protocol):
    """Protocol for catalogs that supply recommendation candidates.

    Implementations raise CatalogFetchError on failure; callers decide
    whether a failure is fatal.
    """

    @property
    def name(self) -> str: ...

    def search_by_author(
        self, author: str, max_results: int = 10
    ) -> list[RecommendationItem]: ...

    def search_by_subject(
        self, subject: str, max_results: int = 10
    ) -> list[RecommendationItem]: ...


@runtime_checkable
class SeriesSource(Protocol):
    """Protocol for catalogs that can report which series a book belongs to."""

    def fetch_series_metadata(self, title: str, author: str | None = None) -> SeriesMetadata: ...
