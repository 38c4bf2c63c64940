# ABOUTME: Staged match decision (ISBN, then title, then author) and best-match selection.
# ABOUTME: Produces a confidence-scored MatchResult; find_best_match picks one candidate or none.

from collections.abc import Iterable

from bookmatch.matching import thresholds as t
from bookmatch.matching.matchers import match_authors, match_isbn, match_titles
from bookmatch.matching.text import normalize_author
from bookmatch.matching.types import (
    MatchCandidate,
    MatchDetails,
    MatchResult,
    MatchTarget,
    MatchType,
)


def match_metadata(candidate: MatchCandidate, target: MatchTarget) -> MatchResult:
    """Decide whether a candidate search result describes the target book.

    Stages:
    1. ISBN - authoritative; a match short-circuits text comparison.
    2. Title - a title mismatch rejects outright.
    3. Author - once the target names any author, the author must match too.

    Confidence for text matches is 0.6 * title score + 0.4 * author score.
    Never raises on missing fields; absent data degrades the scores instead.
    """
    if match_isbn(candidate, target):
        return MatchResult(
            is_match=True,
            confidence=t.ISBN_CONFIDENCE,
            match_type=MatchType.ISBN,
            details=MatchDetails(isbn_match=True),
        )

    title = match_titles(candidate.title, target.title)
    if not title.match:
        return MatchResult(
            is_match=False,
            confidence=title.score,
            match_type=MatchType.NONE,
            details=MatchDetails(title_score=title.score),
        )

    author = match_authors(candidate.author, target.authors)
    confidence = title.score * t.WEIGHT_TITLE + author.score * t.WEIGHT_AUTHOR
    details = MatchDetails(title_score=title.score, author_score=author.score)

    # blank names do not count as a known author
    has_authors = any(normalize_author(name) for name in target.authors)
    if has_authors and not author.match:
        return MatchResult(
            is_match=False,
            confidence=confidence,
            match_type=MatchType.NONE,
            details=details,
        )

    return MatchResult(
        is_match=True,
        confidence=confidence,
        match_type=MatchType.TITLE_AUTHOR if has_authors else MatchType.TITLE_ONLY,
        details=details,
    )


def find_best_match(
    candidates: Iterable[MatchCandidate], target: MatchTarget
) -> tuple[MatchCandidate | None, MatchResult | None]:
    """Return the matching candidate with the highest confidence, and its result.

    Ties keep the earliest candidate. Returns (None, None) when nothing
    matches; callers must treat that as "no suitable match", not fall back to
    a weaker guess.
    """
    best_candidate: MatchCandidate | None = None
    best_result: MatchResult | None = None

    for candidate in candidates:
        result = match_metadata(candidate, target)
        if not result.is_match:
            continue
        if best_result is None or result.confidence > best_result.confidence:
            best_candidate = candidate
            best_result = result

    return best_candidate, best_result
