# ABOUTME: Auto-add flow: pick the search result to download for a recommended book.
# ABOUTME: Refuses to guess - without a confident match the caller must search manually.

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from bookmatch.matching.engine import find_best_match
from bookmatch.matching.types import MatchCandidate, MatchResult, MatchTarget
from bookmatch.recommend.types import RecommendationItem

logger = logging.getLogger(__name__)

NO_MATCH_MESSAGE = "No suitable match found. Try searching manually."
NO_RESULTS_MESSAGE = "Book not found in search results. Try searching manually."

DEFAULT_PREFERRED_FORMAT = "epub"


@dataclass(frozen=True)
class AutoAddDecision:
    """Which search result (if any) to download for a target book."""

    candidate: MatchCandidate | None
    result: MatchResult | None
    message: str | None = None

    @property
    def found(self) -> bool:
        return self.candidate is not None


def target_from_recommendation(rec: RecommendationItem) -> MatchTarget:
    """Build a match target from a recommendation's own metadata.

    The ISBN is routed to isbn10 or isbn13 by its length; any other length is
    not trusted as an ISBN.
    """
    isbn = rec.isbn or ""
    return MatchTarget(
        title=rec.title,
        authors=[rec.author] if rec.author else [],
        isbn10=isbn if len(isbn) == 10 else None,
        isbn13=isbn if len(isbn) == 13 else None,
    )


def _candidate_format(candidate: MatchCandidate) -> str:
    return str(candidate.extra.get("format") or "").lower()


def select_download(
    results: Sequence[MatchCandidate],
    target: MatchTarget,
    preferred_format: str | None = DEFAULT_PREFERRED_FORMAT,
) -> AutoAddDecision:
    """Choose the search result that is confidently the target book.

    When any result is in the preferred format, only those are considered.
    An empty result list or no confident match returns a decision with no
    candidate and a user-facing message; that is a normal outcome, not an
    error.
    """
    if not results:
        return AutoAddDecision(candidate=None, result=None, message=NO_RESULTS_MESSAGE)

    pool = list(results)
    if preferred_format:
        wanted = preferred_format.lower()
        preferred = [c for c in pool if _candidate_format(c) == wanted]
        if preferred:
            pool = preferred

    candidate, result = find_best_match(pool, target)
    if candidate is None:
        logger.info("No confident match for %r among %d result(s)", target.title, len(pool))
        return AutoAddDecision(candidate=None, result=None, message=NO_MATCH_MESSAGE)

    logger.info(
        "Match found for %r: %r (confidence %.2f, %s)",
        target.title,
        candidate.title,
        result.confidence,
        result.match_type.value,
    )
    return AutoAddDecision(candidate=candidate, result=result)
