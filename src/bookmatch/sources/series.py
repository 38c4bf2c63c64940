# ABOUTME: Series metadata: title-pattern extraction and rate-limited batch enrichment.
# ABOUTME: Batches run lookups concurrently, isolate per-item failures, and pause between waves.

import logging
import re
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from bookmatch.recommend.types import LibraryItem

if TYPE_CHECKING:
    from bookmatch.sources.provider import SeriesSource

logger = logging.getLogger(__name__)

SERIES_BATCH_SIZE = 5
SERIES_BATCH_DELAY = 1.0

# Shorter captured names are almost always noise ("Vol", "No").
_MIN_SERIES_NAME_LENGTH = 3

_WORD_NUMBERS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "i": 1,
    "ii": 2,
    "iii": 3,
    "iv": 4,
    "v": 5,
    "vi": 6,
    "vii": 7,
    "viii": 8,
    "ix": 9,
    "x": 10,
}

_NUMBER_WORDS = "one|two|three|four|five|six|seven|eight|nine|ten"

# Tried in order; the first pattern whose capture converts to a number wins.
_BOOK_NUMBER_PATTERNS = [
    re.compile(r"book\s*#?\s*(\d+)", re.IGNORECASE),
    re.compile(rf"book\s+({_NUMBER_WORDS})", re.IGNORECASE),
    re.compile(r"vol(?:ume)?\.?\s*(\d+)", re.IGNORECASE),
    re.compile(r"part\s*(\d+)", re.IGNORECASE),
    re.compile(rf"part\s+({_NUMBER_WORDS})", re.IGNORECASE),
    re.compile(r"#(\d+)"),
    re.compile(r"no\.?\s*(\d+)", re.IGNORECASE),
    re.compile(r"number\s*(\d+)", re.IGNORECASE),
    re.compile(r"\s(i{1,3}|iv|vi{0,3}|ix|x)$", re.IGNORECASE),
    re.compile(r"(\d+)(?:st|nd|rd|th)\s*(?:book|novel|volume|installment)", re.IGNORECASE),
    re.compile(r"\s(\d+)$"),
]

_SERIES_NAME_PATTERNS = [
    re.compile(r"^(.+?)[\s:]+book\s*#?\s*\d+", re.IGNORECASE),
    re.compile(r"^(.+?)[\s:]+vol(?:ume)?\.?\s*\d+", re.IGNORECASE),
    re.compile(r"^(.+?)[\s:]+part\s*\d+", re.IGNORECASE),
    re.compile(r"^(.+?)[,\s:]+#\d+", re.IGNORECASE),
    re.compile(r"^.+?\((.+?)\s*#?\d+\)", re.IGNORECASE),
    re.compile(r"^(.+?)\s+\d+$"),
]

Confidence = Literal["high", "medium", "low"]
SeriesSourceName = Literal["openlibrary", "title_pattern"]


@dataclass(frozen=True)
class SeriesMetadata:
    """Which series a book belongs to, its position, and how sure we are."""

    series_name: str | None
    series_index: int | None
    confidence: Confidence
    source: SeriesSourceName

    def to_dict(self) -> dict[str, str | int | None]:
        return {
            "series_name": self.series_name,
            "series_index": self.series_index,
            "confidence": self.confidence,
            "source": self.source,
        }


UNKNOWN_SERIES = SeriesMetadata(
    series_name=None, series_index=None, confidence="low", source="title_pattern"
)


def extract_book_number(title: str) -> int | None:
    """Find a position-in-series number in a title ("Book 2", "Part Three", "II")."""
    for pattern in _BOOK_NUMBER_PATTERNS:
        m = pattern.search(title)
        if not m:
            continue
        value = m.group(1)
        if value.isdigit():
            return int(value)
        number = _WORD_NUMBERS.get(value.lower())
        if number:
            return number
    return None


def extract_series_from_title(title: str) -> tuple[str, int | None] | None:
    """Pull a series name (and number, if any) out of the title itself.

    Returns (series_name, book_number) or None when no pattern yields a
    plausible name.
    """
    for pattern in _SERIES_NAME_PATTERNS:
        m = pattern.search(title)
        if not m:
            continue
        series_name = m.group(1).strip()
        if len(series_name) >= _MIN_SERIES_NAME_LENGTH:
            return series_name, extract_book_number(title)
    return None


def series_from_title_pattern(title: str) -> SeriesMetadata:
    """Low-confidence series guess using only the title text."""
    found = extract_series_from_title(title)
    if found is not None:
        series_name, book_number = found
        logger.debug("Title pattern match: series=%r, #%s", series_name, book_number)
        return SeriesMetadata(
            series_name=series_name,
            series_index=book_number,
            confidence="low",
            source="title_pattern",
        )

    book_number = extract_book_number(title)
    if book_number:
        return SeriesMetadata(
            series_name=None,
            series_index=book_number,
            confidence="low",
            source="title_pattern",
        )
    return UNKNOWN_SERIES


def batch_fetch_series_metadata(
    items: Sequence[LibraryItem],
    source: "SeriesSource",
    *,
    batch_size: int = SERIES_BATCH_SIZE,
    delay: float = SERIES_BATCH_DELAY,
    sleep: Callable[[float], None] = time.sleep,
) -> list[SeriesMetadata]:
    """Look up series metadata for many items without tripping rate limits.

    Items are processed in fixed-size batches. Lookups within a batch run
    concurrently; a failed lookup yields UNKNOWN_SERIES for that item only.
    A fixed pause separates consecutive batches. There is no retry and no
    early exit: every item gets exactly one attempt.

    Returns one result per item, in input order. Ids are not consulted, so
    duplicate or missing ids never merge results.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be at least 1, got {batch_size}")

    results: list[SeriesMetadata] = []
    starts = range(0, len(items), batch_size)

    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        for batch_no, start in enumerate(starts):
            batch = items[start : start + batch_size]
            logger.debug(
                "Series batch %d/%d: %d item(s)", batch_no + 1, len(starts), len(batch)
            )
            futures = [
                (item, executor.submit(source.fetch_series_metadata, item.title, item.author))
                for item in batch
            ]
            for item, future in futures:
                try:
                    results.append(future.result())
                except Exception as exc:
                    logger.warning("Series lookup failed for %r: %s", item.title, exc)
                    results.append(UNKNOWN_SERIES)

            if batch_no < len(starts) - 1:
                sleep(delay)

    return results
