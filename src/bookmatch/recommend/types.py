# ABOUTME: Data structures for the recommendation pipeline.
# ABOUTME: LibraryItem is an owned book or audiobook; RecommendationItem is an external candidate.

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class LibraryItem:
    """A book or audiobook the user already owns.

    Only the fields the profile analyzer and the owned-item filter read are
    modelled; everything else about the stored record is irrelevant here.
    """

    title: str
    author: str | None = None
    isbn: str | None = None
    tags: list[str] = field(default_factory=list)
    series: str | None = None
    id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LibraryItem":
        raw_id = data.get("id")
        return cls(
            title=data.get("title") or "",
            author=data.get("author"),
            isbn=data.get("isbn"),
            tags=list(data.get("tags") or []),
            series=data.get("series"),
            id=str(raw_id) if raw_id is not None else None,
        )


@dataclass
class RecommendationItem:
    """A candidate recommendation fetched from an external catalog.

    ``reason`` stays None until the reason annotator runs, late in the pipeline.
    """

    source_id: str
    title: str
    author: str
    description: str | None = None
    cover_url: str | None = None
    isbn: str | None = None
    published_date: str | None = None
    publisher: str | None = None
    categories: list[str] | None = None
    average_rating: float | None = None
    page_count: int | None = None
    reason: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class UserLibraryProfile:
    """Reading preferences inferred from the owned library.

    Derived per request and never persisted. Lists are ordered by descending
    frequency.
    """

    favorite_authors: tuple[str, ...] = ()
    top_genres: tuple[str, ...] = ()
    top_tags: tuple[str, ...] = ()
    preferred_series: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "favorite_authors": list(self.favorite_authors),
            "top_genres": list(self.top_genres),
            "top_tags": list(self.top_tags),
            "preferred_series": list(self.preferred_series),
        }
