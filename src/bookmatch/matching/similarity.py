# ABOUTME: String and token-set similarity metrics used by the title and author matchers.
# ABOUTME: Levenshtein edit distance, Jaccard overlap, and (bidirectional) containment.

from collections.abc import Sequence

from bookmatch.matching.text import normalize_text


def levenshtein_distance(s1: str, s2: str) -> int:
    """Classic edit distance with unit-cost insertion, deletion, and substitution.

    Compares the strings exactly as given; callers normalize first if needed.
    Keeps only two rows of the DP table.
    """
    if len(s1) < len(s2):
        s1, s2 = s2, s1
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i] + [0] * len(s2)
        for j, c2 in enumerate(s2, start=1):
            if c1 == c2:
                current[j] = previous[j - 1]
            else:
                current[j] = 1 + min(previous[j], current[j - 1], previous[j - 1])
        previous = current
    return previous[-1]


def levenshtein_similarity(s1: str | None, s2: str | None) -> float:
    """Edit-distance similarity in [0.0, 1.0] over the normalized strings.

    Returns 1.0 for equal normalized strings and 0.0 when only one of them is
    empty. Symmetric.
    """
    n1 = normalize_text(s1)
    n2 = normalize_text(s2)
    if n1 == n2:
        return 1.0
    if not n1 or not n2:
        return 0.0
    distance = levenshtein_distance(n1, n2)
    return 1.0 - distance / max(len(n1), len(n2))


def jaccard_similarity(tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
    """Intersection over union of two token sets. Duplicates count once."""
    set1 = set(tokens1)
    set2 = set(tokens2)
    union = set1 | set2
    if not union:
        return 0.0
    return len(set1 & set2) / len(union)


def containment_ratio(tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
    """Fraction of tokens in tokens1 that also occur in tokens2 (0.0 if tokens1 is empty)."""
    if not tokens1:
        return 0.0
    lookup = set(tokens2)
    matched = sum(1 for t in tokens1 if t in lookup)
    return matched / len(tokens1)


def bidirectional_containment(tokens1: Sequence[str], tokens2: Sequence[str]) -> float:
    """The smaller of the two containment directions."""
    return min(containment_ratio(tokens1, tokens2), containment_ratio(tokens2, tokens1))
