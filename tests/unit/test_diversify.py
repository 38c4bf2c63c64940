# ABOUTME: Unit tests for round-robin author diversification.
# ABOUTME: Verifies per-author caps at the head of the list and that nothing is dropped.

import pytest

from bookmatch.recommend.diversify import diversify_recommendations
from tests.fixtures.recommendations import make_rec


class TestDiversifyRecommendations:
    """Tests for diversify_recommendations."""

    def test_distinct_authors_unchanged(self) -> None:
        recs = [make_rec(str(i), f"Book {i}", f"Author {i}") for i in range(5)]
        assert diversify_recommendations(recs) == recs

    def test_single_author_keeps_everything(self) -> None:
        recs = [make_rec(str(i), f"Book {i}", "Prolific Writer") for i in range(10)]
        result = diversify_recommendations(recs, max_per_author=3)
        assert result == recs

    def test_cap_interleaves_authors(self) -> None:
        recs = [make_rec(f"a{i}", f"A{i}", "Alice") for i in range(5)]
        recs += [make_rec(f"b{i}", f"B{i}", "Bob") for i in range(2)]
        result = diversify_recommendations(recs, max_per_author=2)
        assert [r.source_id for r in result] == ["a0", "b0", "a1", "b1", "a2", "a3", "a4"]

    def test_head_capped_per_author(self) -> None:
        recs = [make_rec(f"a{i}", f"A{i}", "Alice") for i in range(4)]
        recs += [make_rec(f"b{i}", f"B{i}", "Bob") for i in range(4)]
        recs += [make_rec("c0", "C0", "Carol")]
        result = diversify_recommendations(recs, max_per_author=1)
        assert [r.source_id for r in result[:3]] == ["a0", "b0", "c0"]
        assert [r.source_id for r in result[3:]] == ["a1", "a2", "a3", "b1", "b2", "b3"]

    def test_author_grouping_ignores_case(self) -> None:
        recs = [
            make_rec("1", "One", "Terry Pratchett"),
            make_rec("2", "Two", "terry pratchett"),
            make_rec("3", "Three", "Neil Gaiman"),
        ]
        result = diversify_recommendations(recs, max_per_author=1)
        assert [r.source_id for r in result] == ["1", "3", "2"]

    def test_blank_authors_share_a_group(self) -> None:
        recs = [make_rec("1", "One", ""), make_rec("2", "Two", "  "), make_rec("3", "Three", "X")]
        result = diversify_recommendations(recs, max_per_author=1)
        assert [r.source_id for r in result] == ["1", "3", "2"]

    def test_is_permutation(self) -> None:
        authors = ["A", "B", "A", "C", "A", "B", "A", "A"]
        recs = [make_rec(str(i), f"T{i}", a) for i, a in enumerate(authors)]
        result = diversify_recommendations(recs, max_per_author=2)
        assert len(result) == len(recs)
        assert sorted(r.source_id for r in result) == sorted(r.source_id for r in recs)

    def test_empty(self) -> None:
        assert diversify_recommendations([]) == []

    def test_invalid_cap(self) -> None:
        with pytest.raises(ValueError, match="max_per_author"):
            diversify_recommendations([], max_per_author=0)
