# ABOUTME: End-to-end recommendation pipeline: profile, fetch, score, diversify, annotate.
# ABOUTME: Fetch failures are isolated per author/genre search and never abort the run.

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from bookmatch.recommend.diversify import DEFAULT_MAX_PER_AUTHOR, diversify_recommendations
from bookmatch.recommend.profile import analyze_library, build_owned_index, generate_cache_key
from bookmatch.recommend.reasons import add_recommendation_reasons
from bookmatch.recommend.scoring import score_recommendations
from bookmatch.recommend.types import LibraryItem, RecommendationItem, UserLibraryProfile
from bookmatch.sources.http import CatalogFetchError
from bookmatch.sources.provider import RecommendationSource

logger = logging.getLogger(__name__)

DEFAULT_FETCH_RESULTS = 50
DEFAULT_RECOMMENDATION_LIMIT = 30

# How many favorite authors and top genres to search, and results per search.
_SEARCH_AUTHOR_COUNT = 3
_SEARCH_GENRE_COUNT = 3
_RESULTS_PER_SEARCH = 10


@dataclass
class RecommendationRun:
    """Output of one pipeline run, with the inputs that shaped it."""

    profile: UserLibraryProfile
    cache_key: str
    recommendations: list[RecommendationItem] = field(default_factory=list)
    fetched_count: int = 0


def fetch_recommendations(
    profile: UserLibraryProfile,
    source: RecommendationSource,
    max_results: int = DEFAULT_FETCH_RESULTS,
) -> list[RecommendationItem]:
    """Gather a candidate pool for the profile from an external catalog.

    Searches by the first few favorite authors, then the first few top
    genres. Candidates are de-duplicated by source id, first occurrence wins.
    A failed search only loses its own contribution.
    """
    pool: dict[str, RecommendationItem] = {}

    def _collect(kind: str, term: str, results: list[RecommendationItem]) -> None:
        added = 0
        for rec in results:
            if rec.source_id not in pool:
                pool[rec.source_id] = rec
                added += 1
        logger.debug("%s search %r added %d candidate(s)", kind, term, added)

    for author in profile.favorite_authors[:_SEARCH_AUTHOR_COUNT]:
        try:
            results = source.search_by_author(author, _RESULTS_PER_SEARCH)
        except CatalogFetchError as exc:
            logger.warning("Error fetching books by %s: %s", author, exc)
            continue
        _collect("Author", author, results)

    for genre in profile.top_genres[:_SEARCH_GENRE_COUNT]:
        try:
            results = source.search_by_subject(genre, _RESULTS_PER_SEARCH)
        except CatalogFetchError as exc:
            logger.warning("Error fetching books for %s: %s", genre, exc)
            continue
        _collect("Genre", genre, results)

    return list(pool.values())[:max_results]


def recommend(
    books: Sequence[LibraryItem],
    audiobooks: Sequence[LibraryItem],
    source: RecommendationSource,
    *,
    max_per_author: int = DEFAULT_MAX_PER_AUTHOR,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
    max_results: int = DEFAULT_FETCH_RESULTS,
    user_id: str = "default",
) -> RecommendationRun:
    """Produce an ordered, author-capped, annotated recommendation list.

    Owned items are filtered out, the rest ranked by relevance to the
    library profile, diversified by author, given a reason, and truncated to
    ``limit``.
    """
    profile = analyze_library(books, audiobooks)
    cache_key = generate_cache_key(books, audiobooks, user_id)

    candidates = fetch_recommendations(profile, source, max_results)
    owned = build_owned_index(books, audiobooks)
    scored = score_recommendations(candidates, profile, owned)
    diversified = diversify_recommendations(scored, max_per_author)
    annotated = add_recommendation_reasons(diversified, profile)

    logger.info(
        "Recommendations: %d fetched, %d kept after scoring, returning %d",
        len(candidates),
        len(scored),
        min(limit, len(annotated)),
    )
    return RecommendationRun(
        profile=profile,
        cache_key=cache_key,
        recommendations=annotated[:limit],
        fetched_count=len(candidates),
    )
