# ABOUTME: Text normalization and tokenization for comparing noisy bibliographic metadata.
# ABOUTME: Folds case and diacritics, reorders "Last, First" authors, and strips title stopwords.

import re
import unicodedata

from bookmatch.matching.vocabulary import TITLE_STOPWORDS

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")
_ISBN_STRIP_RE = re.compile(r"[\s-]")


def _strip_diacritics(text: str) -> str:
    """Decompose to NFD and drop the combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize_text(text: str | None) -> str:
    """Normalize text for comparison.

    Lowercases, strips diacritics, replaces punctuation with spaces, collapses
    runs of whitespace, and trims. Idempotent: normalizing twice is the same as
    normalizing once.
    """
    if not text:
        return ""
    folded = _strip_diacritics(text.lower())
    spaced = _NON_WORD_RE.sub(" ", folded)
    return _WHITESPACE_RE.sub(" ", spaced).strip()


def normalize_isbn(isbn: str | None) -> str:
    """Strip hyphens and spaces from an ISBN. Case and digits are left alone."""
    if not isbn:
        return ""
    return _ISBN_STRIP_RE.sub("", isbn)


def normalize_author(author: str | None) -> str:
    """Normalize an author name, turning 'Last, First' into 'first last'.

    Only the first comma in the raw string is treated as the name separator,
    so 'Tolkien, J.R.R.' becomes 'j r r tolkien'.
    """
    if not author:
        return ""
    if "," not in author:
        return normalize_text(author)

    comma_idx = author.index(",")
    before = normalize_text(author[:comma_idx])
    after = normalize_text(author[comma_idx + 1 :])
    return f"{after} {before}".strip()


def get_title_tokens(title: str | None) -> list[str]:
    """Split a title into normalized tokens with stopwords removed."""
    return [t for t in normalize_text(title).split() if t not in TITLE_STOPWORDS]


def get_author_tokens(author: str | None) -> list[str]:
    """Split an author name into normalized tokens.

    Single-letter tokens are initials and kept as-is; longer tokens lose a
    trailing period.
    """
    tokens = []
    for token in normalize_author(author).split():
        if len(token) > 1 and token.endswith("."):
            token = token[:-1]
        tokens.append(token)
    return tokens
