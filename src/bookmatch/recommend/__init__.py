# ABOUTME: Recommendation ranking package: library profile, scoring, diversification, reasons.
# ABOUTME: The network-facing pipeline lives in bookmatch.recommend.engine.

from bookmatch.recommend.diversify import diversify_recommendations
from bookmatch.recommend.profile import analyze_library, build_owned_index, generate_cache_key
from bookmatch.recommend.reasons import add_recommendation_reasons
from bookmatch.recommend.scoring import score_recommendations
from bookmatch.recommend.types import LibraryItem, RecommendationItem, UserLibraryProfile

__all__ = [
    "LibraryItem",
    "RecommendationItem",
    "UserLibraryProfile",
    "add_recommendation_reasons",
    "analyze_library",
    "build_owned_index",
    "diversify_recommendations",
    "generate_cache_key",
    "score_recommendations",
]
