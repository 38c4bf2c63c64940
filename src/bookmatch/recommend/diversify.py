# ABOUTME: Round-robin diversification of a ranked recommendation list by author.
# ABOUTME: Caps each author's share of the head of the list without dropping any item.

from collections import deque
from collections.abc import Sequence

from bookmatch.recommend.types import RecommendationItem

DEFAULT_MAX_PER_AUTHOR = 3

_UNKNOWN_AUTHOR = "__unknown__"


def _author_key(rec: RecommendationItem) -> str:
    if rec.author and rec.author.strip():
        return rec.author.lower()
    return _UNKNOWN_AUTHOR


def diversify_recommendations(
    recommendations: Sequence[RecommendationItem],
    max_per_author: int = DEFAULT_MAX_PER_AUTHOR,
) -> list[RecommendationItem]:
    """Reorder recommendations so no author dominates the top of the list.

    Items are grouped by lower-cased author (blank authors share one group).
    Sweeps visit the groups in first-appearance order and take the next item
    from each group still under ``max_per_author``, until a sweep takes
    nothing. Whatever is left is appended group by group, so the output is a
    permutation of the input.
    """
    if max_per_author < 1:
        raise ValueError(f"max_per_author must be at least 1, got {max_per_author}")

    groups: dict[str, deque[RecommendationItem]] = {}
    for rec in recommendations:
        groups.setdefault(_author_key(rec), deque()).append(rec)

    taken = dict.fromkeys(groups, 0)
    diversified: list[RecommendationItem] = []

    added = True
    while added:
        added = False
        for key, queue in groups.items():
            if queue and taken[key] < max_per_author:
                diversified.append(queue.popleft())
                taken[key] += 1
                added = True

    for queue in groups.values():
        diversified.extend(queue)

    return diversified
