# ABOUTME: Unit tests for the staged match decision and best-candidate selection.
# ABOUTME: Covers ISBN short-circuit, title rejection, author gating, confidence, and ties.

from unittest.mock import patch

import pytest

from bookmatch.matching.engine import find_best_match, match_metadata
from bookmatch.matching.types import (
    MatchCandidate,
    MatchDetails,
    MatchResult,
    MatchTarget,
    MatchType,
)

HOBBIT = MatchTarget(title="The Hobbit", authors=["J.R.R. Tolkien"])


class TestMatchMetadata:
    """Tests for match_metadata."""

    def test_isbn_match_short_circuits(self) -> None:
        """A shared ISBN wins even when the titles disagree."""
        candidate = MatchCandidate(title="Der kleine Hobbit", isbn="978-0-261-10221-7")
        target = MatchTarget(title="The Hobbit", isbn13="9780261102217")
        result = match_metadata(candidate, target)
        assert result.is_match is True
        assert result.confidence == 1.0
        assert result.match_type is MatchType.ISBN
        assert result.details == MatchDetails(isbn_match=True)

    def test_title_mismatch_rejects(self) -> None:
        candidate = MatchCandidate(title="Good Omens", author="J.R.R. Tolkien")
        result = match_metadata(candidate, HOBBIT)
        assert result.is_match is False
        assert result.match_type is MatchType.NONE
        assert result.confidence == result.details.title_score
        assert result.details.author_score is None

    def test_title_and_author_match(self) -> None:
        candidate = MatchCandidate(title="The Hobbit", author="Tolkien, J. R. R.")
        result = match_metadata(candidate, HOBBIT)
        assert result.is_match is True
        assert result.match_type is MatchType.TITLE_AUTHOR
        # 0.6 * 1.0 + 0.4 * 0.95
        assert result.confidence == pytest.approx(0.98)

    def test_title_only_when_target_has_no_authors(self) -> None:
        candidate = MatchCandidate(title="The Hobbit", author="Anyone At All")
        result = match_metadata(candidate, MatchTarget(title="The Hobbit"))
        assert result.is_match is True
        assert result.match_type is MatchType.TITLE_ONLY
        assert result.confidence == pytest.approx(0.8)

    def test_blank_target_authors_count_as_no_authors(self) -> None:
        candidate = MatchCandidate(title="Dune", author="Frank Herbert")
        result = match_metadata(candidate, MatchTarget(title="Dune", authors=["", "  ", ", "]))
        assert result.is_match is True
        assert result.match_type is MatchType.TITLE_ONLY
        assert result.confidence == pytest.approx(0.8)

    def test_wrong_author_rejects(self) -> None:
        candidate = MatchCandidate(title="The Hobbit", author="Neil Gaiman")
        result = match_metadata(candidate, HOBBIT)
        assert result.is_match is False
        assert result.match_type is MatchType.NONE
        assert result.details.title_score == 1.0
        assert result.details.author_score is not None
        assert result.details.author_score < 0.6

    def test_missing_candidate_author_is_neutral(self) -> None:
        candidate = MatchCandidate(title="The Hobbit")
        result = match_metadata(candidate, HOBBIT)
        assert result.is_match is True
        assert result.match_type is MatchType.TITLE_AUTHOR
        assert result.confidence == pytest.approx(0.8)

    def test_derivative_work_rejected(self) -> None:
        candidate = MatchCandidate(title="The Hobbit Companion", author="J.R.R. Tolkien")
        result = match_metadata(candidate, HOBBIT)
        assert result.is_match is False

    def test_empty_candidate_never_raises(self) -> None:
        result = match_metadata(MatchCandidate(title=""), HOBBIT)
        assert result.is_match is False


class TestFindBestMatch:
    """Tests for find_best_match."""

    def test_empty_candidates(self) -> None:
        assert find_best_match([], HOBBIT) == (None, None)

    def test_no_candidate_matches(self) -> None:
        candidates = [
            MatchCandidate(title="The Hobbit Companion", author="David Day"),
            MatchCandidate(title="Good Omens", author="Neil Gaiman"),
        ]
        assert find_best_match(candidates, HOBBIT) == (None, None)

    def test_picks_highest_confidence(self) -> None:
        weaker = MatchCandidate(title="The Hobbit", extra={"id": "no-author"})
        stronger = MatchCandidate(
            title="The Hobbit", author="J.R.R. Tolkien", extra={"id": "named"}
        )
        candidate, result = find_best_match([weaker, stronger], HOBBIT)
        assert candidate is stronger
        assert result is not None
        assert result.match_type is MatchType.TITLE_AUTHOR

    def test_isbn_match_beats_text_match(self) -> None:
        target = MatchTarget(title="The Hobbit", authors=["J.R.R. Tolkien"], isbn13="9780261102217")
        text_only = MatchCandidate(title="The Hobbit", author="J.R.R. Tolkien")
        by_isbn = MatchCandidate(title="Hobbit, The", isbn13="9780261102217")
        candidate, result = find_best_match([text_only, by_isbn], target)
        assert candidate is by_isbn
        assert result is not None
        assert result.match_type is MatchType.ISBN

    def test_tie_keeps_first_candidate(self) -> None:
        """Equal confidence never displaces an earlier candidate."""
        first = MatchCandidate(title="A", extra={"id": "a"})
        second = MatchCandidate(title="B", extra={"id": "b"})
        third = MatchCandidate(title="C", extra={"id": "c"})
        results = [
            MatchResult(is_match=True, confidence=0.8, match_type=MatchType.TITLE_ONLY),
            MatchResult(is_match=True, confidence=0.95, match_type=MatchType.TITLE_AUTHOR),
            MatchResult(is_match=True, confidence=0.95, match_type=MatchType.TITLE_AUTHOR),
        ]
        with patch("bookmatch.matching.engine.match_metadata", side_effect=results):
            candidate, result = find_best_match([first, second, third], HOBBIT)
        assert candidate is second
        assert result is results[1]

    def test_identical_candidates_keep_first(self) -> None:
        first = MatchCandidate(title="The Hobbit", author="J.R.R. Tolkien", extra={"id": "1"})
        second = MatchCandidate(title="The Hobbit", author="J.R.R. Tolkien", extra={"id": "2"})
        candidate, _ = find_best_match([first, second], HOBBIT)
        assert candidate is first

    def test_accepts_generator(self) -> None:
        titles = ["Mort", "The Hobbit"]
        candidates = (MatchCandidate(title=t, author="J.R.R. Tolkien") for t in titles)
        candidate, _ = find_best_match(candidates, HOBBIT)
        assert candidate is not None
        assert candidate.title == "The Hobbit"
