# ABOUTME: Relevance scoring of external recommendation candidates against a library profile.
# ABOUTME: Drops already-owned items and ranks the rest by author, genre, and rating signals.

from collections.abc import Collection, Iterable

from bookmatch.recommend.types import RecommendationItem, UserLibraryProfile

# Score assigned to candidates the user already owns; filtered out afterwards.
EXCLUDED_SCORE = -1.0

_FAVORITE_AUTHOR_BONUS = 10.0
_GENRE_BONUS = 5.0


def matches_favorite_author(rec: RecommendationItem, profile: UserLibraryProfile) -> str | None:
    """Return the first favorite author named in the candidate's author string."""
    author = (rec.author or "").lower()
    for favorite in profile.favorite_authors:
        if favorite.lower() in author:
            return favorite
    return None


def matching_categories(rec: RecommendationItem, profile: UserLibraryProfile) -> list[str]:
    """Candidate categories that contain any top genre (case-insensitive)."""
    genres = [g.lower() for g in profile.top_genres]
    return [
        category
        for category in rec.categories or []
        if any(genre in category.lower() for genre in genres)
    ]


def score_recommendation(
    rec: RecommendationItem, profile: UserLibraryProfile, owned: Collection[str]
) -> float:
    """Score one candidate.

    Owned items (matched by ISBN or lower-cased title) score EXCLUDED_SCORE.
    Otherwise: +10 for a favorite author, +5 per category matching a top
    genre, plus the average rating when present.
    """
    if rec.isbn and rec.isbn in owned:
        return EXCLUDED_SCORE
    if rec.title.lower() in owned:
        return EXCLUDED_SCORE

    score = 0.0
    if matches_favorite_author(rec, profile) is not None:
        score += _FAVORITE_AUTHOR_BONUS
    score += _GENRE_BONUS * len(matching_categories(rec, profile))
    if rec.average_rating:
        score += rec.average_rating
    return score


def score_recommendations(
    recommendations: Iterable[RecommendationItem],
    profile: UserLibraryProfile,
    owned: Collection[str],
) -> list[RecommendationItem]:
    """Keep candidates with a positive score, best first.

    The sort is stable, so equal scores keep their input order.
    """
    scored = [(rec, score_recommendation(rec, profile, owned)) for rec in recommendations]
    kept = [pair for pair in scored if pair[1] > 0]
    kept.sort(key=lambda pair: pair[1], reverse=True)
    return [rec for rec, _ in kept]
