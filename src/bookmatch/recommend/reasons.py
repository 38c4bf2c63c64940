# ABOUTME: Attaches a short human-readable justification to each recommendation.
# ABOUTME: The first applicable rule wins: favorite author, genre, rating, then a default.

from collections.abc import Iterable
from dataclasses import replace

from bookmatch.recommend.scoring import matches_favorite_author, matching_categories
from bookmatch.recommend.types import RecommendationItem, UserLibraryProfile

_HIGH_RATING = 4.0
_DEFAULT_REASON = "Based on your reading preferences"


def recommendation_reason(rec: RecommendationItem, profile: UserLibraryProfile) -> str:
    favorite = matches_favorite_author(rec, profile)
    if favorite is not None:
        return f"By {favorite}, one of your favorite authors"

    categories = matching_categories(rec, profile)
    if categories:
        return f"Matches your interest in {categories[0]}"

    if rec.average_rating is not None and rec.average_rating >= _HIGH_RATING:
        return "Highly rated by readers"
    return _DEFAULT_REASON


def add_recommendation_reasons(
    recommendations: Iterable[RecommendationItem], profile: UserLibraryProfile
) -> list[RecommendationItem]:
    """Return copies of the recommendations with ``reason`` filled in."""
    return [
        replace(rec, reason=recommendation_reason(rec, profile)) for rec in recommendations
    ]
