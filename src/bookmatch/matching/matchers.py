# ABOUTME: Field-level matchers for titles, authors, and ISBNs.
# ABOUTME: Each combines the similarity metrics into a single match decision for one field.

from collections.abc import Sequence

from bookmatch.matching import thresholds as t
from bookmatch.matching.similarity import (
    bidirectional_containment,
    containment_ratio,
    jaccard_similarity,
    levenshtein_similarity,
)
from bookmatch.matching.text import (
    get_author_tokens,
    get_title_tokens,
    normalize_author,
    normalize_isbn,
    normalize_text,
)
from bookmatch.matching.types import FieldMatch, MatchCandidate, MatchTarget
from bookmatch.matching.vocabulary import DERIVATIVE_TOKENS


def _subtitle_score(tokens1: list[str], tokens2: list[str]) -> float:
    """Score one title as the other plus a subtitle.

    The title with fewer tokens must be (almost) fully contained in the longer
    one. Every extra token costs a little; a single-token title pays a fixed
    surcharge since one shared word is weak evidence. Extra tokens that mark a
    derivative work cap the score well below the match threshold.
    """
    if len(tokens1) <= len(tokens2):
        shorter, longer = tokens1, tokens2
    else:
        shorter, longer = tokens2, tokens1

    if not shorter:
        return 0.0
    if containment_ratio(shorter, longer) < t.SUBTITLE_CONTAINMENT_FLOOR:
        return 0.0

    shorter_set = set(shorter)
    extra_tokens = [tok for tok in longer if tok not in shorter_set]

    penalty = min(t.SUBTITLE_MAX_PENALTY, len(extra_tokens) * t.SUBTITLE_PENALTY_PER_EXTRA_TOKEN)
    score = t.SUBTITLE_BASE_SCORE - penalty
    if len(shorter) == 1:
        score -= t.SUBTITLE_SINGLE_TOKEN_PENALTY

    if any(tok in DERIVATIVE_TOKENS for tok in extra_tokens):
        score = min(score, t.DERIVATIVE_SCORE_CAP)
    return score


def match_titles(title1: str | None, title2: str | None) -> FieldMatch:
    """Decide whether two raw titles name the same work.

    Handles casing, punctuation, subtitles, and minor typos by taking the best
    of Jaccard overlap, bidirectional containment, edit-distance similarity,
    and the subtitle heuristic.
    """
    if normalize_text(title1) == normalize_text(title2):
        return FieldMatch(match=True, score=1.0)

    tokens1 = get_title_tokens(title1)
    tokens2 = get_title_tokens(title2)

    score = max(
        jaccard_similarity(tokens1, tokens2),
        bidirectional_containment(tokens1, tokens2),
        levenshtein_similarity(title1, title2),
        _subtitle_score(tokens1, tokens2),
    )
    return FieldMatch(match=score >= t.TITLE_MATCH_THRESHOLD, score=score)


def _score_author_pair(
    normalized_result: str, result_tokens: list[str], target_author: str
) -> float:
    """Best score for the result author string against one target author."""
    normalized_target = normalize_author(target_author)
    if not normalized_target:
        return 0.0

    # Handles "Neil Gaiman" inside "Neil Gaiman; Terry Pratchett" and the reverse
    if normalized_target in normalized_result or normalized_result in normalized_target:
        return t.AUTHOR_SUBSTRING_SCORE

    best = 0.0
    # Initials carry too little signal to count here
    significant = [tok for tok in get_author_tokens(target_author) if len(tok) > 1]
    if significant:
        matched = [
            tok
            for tok in significant
            if any(rt in tok or tok in rt for rt in result_tokens)
        ]
        if len(matched) == len(significant):
            best = t.AUTHOR_ALL_TOKENS_SCORE
        else:
            best = len(matched) / len(significant) * t.AUTHOR_PARTIAL_TOKENS_FACTOR

    similarity = levenshtein_similarity(normalized_result, normalized_target)
    return max(best, similarity * t.AUTHOR_EDIT_DISTANCE_FACTOR)


def match_authors(result_author: str | None, target_authors: Sequence[str]) -> FieldMatch:
    """Compare a free-text result author against the target's author list.

    When either side carries no usable name the result is a neutral 0.5 that
    still counts as a match: absence alone never blocks a match, but it does
    not confirm one either.
    """
    normalized_result = normalize_author(result_author)
    named_targets = [a for a in target_authors if normalize_author(a)]
    if not normalized_result or not named_targets:
        return FieldMatch(match=True, score=t.AUTHOR_NEUTRAL_SCORE)

    result_tokens = get_author_tokens(result_author)
    best = max(
        _score_author_pair(normalized_result, result_tokens, target)
        for target in named_targets
    )
    return FieldMatch(match=best >= t.AUTHOR_MATCH_THRESHOLD, score=best)


def _candidate_isbns(candidate: MatchCandidate) -> list[str]:
    raw = (candidate.isbn, candidate.isbn10, candidate.isbn13)
    return [n for n in (normalize_isbn(v) for v in raw) if n]


def _target_isbns(target: MatchTarget) -> list[str]:
    raw = (target.isbn10, target.isbn13)
    return [n for n in (normalize_isbn(v) for v in raw) if n]


def match_isbn(candidate: MatchCandidate, target: MatchTarget) -> bool:
    """True if any candidate ISBN equals, contains, or is contained by a target ISBN.

    Hyphens and spaces are ignored. The substring check lets an ISBN-10 body
    line up with the ISBN-13 that embeds it.
    """
    target_isbns = _target_isbns(target)
    for c_isbn in _candidate_isbns(candidate):
        for t_isbn in target_isbns:
            if c_isbn == t_isbn or t_isbn in c_isbn or c_isbn in t_isbn:
                return True
    return False
