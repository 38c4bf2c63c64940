# ABOUTME: Library profile analysis: favorite authors, top tags/genres, and preferred series.
# ABOUTME: Also derives the owned-item index and a cache key from the library state.

import hashlib
import json
import re
from collections import Counter
from collections.abc import Iterable, Sequence

from bookmatch.recommend.types import LibraryItem, UserLibraryProfile

_AUTHOR_SPLIT_RE = re.compile(r"[,;&]")

# An author needs at least this many owned items to count as a favorite.
_FAVORITE_AUTHOR_MIN_COUNT = 2
_FAVORITE_AUTHOR_LIMIT = 5
_TOP_TAG_LIMIT = 5
_PREFERRED_SERIES_LIMIT = 3


def split_authors(author: str | None) -> list[str]:
    """Split a multi-author string on ',', ';', or '&' into trimmed names."""
    if not author:
        return []
    return [name.strip() for name in _AUTHOR_SPLIT_RE.split(author) if name.strip()]


def _top(counts: Counter[str], limit: int, min_count: int = 1) -> tuple[str, ...]:
    """Keys by descending count; ties keep first-encounter order."""
    ranked = sorted(
        (item for item in counts.items() if item[1] >= min_count),
        key=lambda item: item[1],
        reverse=True,
    )
    return tuple(name for name, _ in ranked[:limit])


def analyze_library(
    books: Iterable[LibraryItem], audiobooks: Iterable[LibraryItem]
) -> UserLibraryProfile:
    """Build a reading profile from everything the user owns.

    Favorite authors appear on at least two items (top 5). Tags double as
    genres (top 5). Preferred series are the top 3 by item count.
    """
    author_counts: Counter[str] = Counter()
    tag_counts: Counter[str] = Counter()
    series_counts: Counter[str] = Counter()

    for item in [*books, *audiobooks]:
        author_counts.update(split_authors(item.author))
        tag_counts.update(item.tags)
        if item.series:
            series_counts[item.series] += 1

    top_tags = _top(tag_counts, _TOP_TAG_LIMIT)
    return UserLibraryProfile(
        favorite_authors=_top(
            author_counts, _FAVORITE_AUTHOR_LIMIT, min_count=_FAVORITE_AUTHOR_MIN_COUNT
        ),
        top_genres=top_tags,
        top_tags=top_tags,
        preferred_series=_top(series_counts, _PREFERRED_SERIES_LIMIT),
    )


def build_owned_index(
    books: Iterable[LibraryItem], audiobooks: Iterable[LibraryItem]
) -> frozenset[str]:
    """ISBNs and lower-cased titles of every owned item, for exclusion checks."""
    keys: set[str] = set()
    for item in [*books, *audiobooks]:
        if item.isbn:
            keys.add(item.isbn)
        keys.add(item.title.lower())
    return frozenset(keys)


def generate_cache_key(
    books: Sequence[LibraryItem],
    audiobooks: Sequence[LibraryItem],
    user_id: str = "default",
) -> str:
    """Hash the parts of the library state that change recommendations.

    The key moves when favorite authors, top tags, or item counts change, so a
    cached recommendation list can be reused until the library shifts.
    """
    profile = analyze_library(books, audiobooks)
    key_data = json.dumps(
        {
            "userId": user_id,
            "favoriteAuthors": sorted(profile.favorite_authors),
            "topTags": sorted(profile.top_tags),
            "bookCount": len(books),
            "audiobookCount": len(audiobooks),
        },
        sort_keys=True,
    )
    return hashlib.sha256(key_data.encode("utf-8")).hexdigest()
