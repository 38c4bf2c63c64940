# ABOUTME: External catalog sources: HTTP client, Google Books recommendations, Open Library series.
# ABOUTME: Everything that talks to the network lives here, behind the protocols in provider.py.

from bookmatch.sources.google_books import GoogleBooksSource
from bookmatch.sources.http import CatalogFetchError, CatalogHttpClient, HttpClient
from bookmatch.sources.openlibrary import OpenLibrarySeriesSource
from bookmatch.sources.provider import RecommendationSource, SeriesSource
from bookmatch.sources.series import SeriesMetadata, batch_fetch_series_metadata

__all__ = [
    "CatalogFetchError",
    "CatalogHttpClient",
    "GoogleBooksSource",
    "HttpClient",
    "OpenLibrarySeriesSource",
    "RecommendationSource",
    "SeriesMetadata",
    "SeriesSource",
    "batch_fetch_series_metadata",
]
