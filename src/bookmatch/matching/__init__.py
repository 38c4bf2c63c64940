# ABOUTME: Bibliographic matching package: decides whether two book records are the same work.
# ABOUTME: Exports the match orchestrator, field matchers, and the match value objects.

from bookmatch.matching.engine import find_best_match, match_metadata
from bookmatch.matching.matchers import match_authors, match_isbn, match_titles
from bookmatch.matching.types import (
    FieldMatch,
    MatchCandidate,
    MatchDetails,
    MatchResult,
    MatchTarget,
    MatchType,
)

__all__ = [
    "FieldMatch",
    "MatchCandidate",
    "MatchDetails",
    "MatchResult",
    "MatchTarget",
    "MatchType",
    "find_best_match",
    "match_authors",
    "match_isbn",
    "match_metadata",
    "match_titles",
]
