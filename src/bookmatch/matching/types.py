# ABOUTME: Value objects for the match decision: candidate, target, and scored result.
# ABOUTME: Transient records created per lookup; MatchResult validates its own invariants.

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

_CANDIDATE_FIELDS = ("title", "author", "isbn", "isbn10", "isbn13")


class MatchType(str, Enum):
    """How a match decision was reached."""

    ISBN = "isbn"
    TITLE_AUTHOR = "title-author"
    TITLE_ONLY = "title-only"
    NONE = "none"


@dataclass
class MatchCandidate:
    """One external search result being evaluated against a target.

    Fields that play no part in matching (download id, format, cover URL, ...)
    are carried untouched in ``extra``.
    """

    title: str
    author: str | None = None
    isbn: str | None = None
    isbn10: str | None = None
    isbn13: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MatchCandidate":
        """Build a candidate from a raw search-result mapping."""
        extra = {k: v for k, v in data.items() if k not in _CANDIDATE_FIELDS}
        return cls(
            title=data.get("title") or "",
            author=data.get("author"),
            isbn=data.get("isbn"),
            isbn10=data.get("isbn10"),
            isbn13=data.get("isbn13"),
            extra=extra,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = dict(self.extra)
        data["title"] = self.title
        for name in ("author", "isbn", "isbn10", "isbn13"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        return data


@dataclass
class MatchTarget:
    """The record we are trying to find. Author order is preserved."""

    title: str
    authors: list[str] = field(default_factory=list)
    isbn10: str | None = None
    isbn13: str | None = None


@dataclass(frozen=True)
class FieldMatch:
    """Decision and score from a single-field matcher (title or author)."""

    match: bool
    score: float


@dataclass(frozen=True)
class MatchDetails:
    """Component scores behind a MatchResult. Unset components stay None."""

    title_score: float | None = None
    author_score: float | None = None
    isbn_match: bool | None = None


@dataclass(frozen=True)
class MatchResult:
    """Confidence-scored verdict on whether a candidate describes the target."""

    is_match: bool
    confidence: float
    match_type: MatchType
    details: MatchDetails = field(default_factory=MatchDetails)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            msg = f"confidence must be between 0.0 and 1.0, got {self.confidence}"
            raise ValueError(msg)
        if self.match_type is MatchType.NONE and self.is_match:
            raise ValueError("match_type 'none' cannot be a match")

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_match": self.is_match,
            "confidence": self.confidence,
            "match_type": self.match_type.value,
            "details": {
                "title_score": self.details.title_score,
                "author_score": self.details.author_score,
                "isbn_match": self.details.isbn_match,
            },
        }
