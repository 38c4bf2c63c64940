# ABOUTME: Fixed word lists used by title tokenization and derivative-work detection.
# ABOUTME: Built once at import as frozensets; bump VOCABULARY_VERSION when either list changes.

VOCABULARY_VERSION = 1

# Words dropped from titles before token comparison: articles, conjunctions,
# prepositions, auxiliary verbs, and generic bibliographic words.
TITLE_STOPWORDS = frozenset(
    {
        "the",
        "a",
        "an",
        "and",
        "or",
        "but",
        "of",
        "in",
        "on",
        "at",
        "to",
        "for",
        "with",
        "by",
        "from",
        "as",
        "is",
        "was",
        "are",
        "be",
        "been",
        "being",
        "have",
        "has",
        "had",
        "do",
        "does",
        "did",
        "will",
        "would",
        "could",
        "should",
        "may",
        "might",
        "must",
        "shall",
        "can",
        "need",
        "into",
        "through",
        "during",
        "before",
        "after",
        "above",
        "below",
        "between",
        "under",
        "again",
        "further",
        "then",
        "once",
        "novel",
        "book",
        "edition",
        "volume",
        "vol",
    }
)

# Extra title words that mark a study guide, summary, or companion rather than the work itself.
DERIVATIVE_TOKENS = frozenset(
    {
        "companion",
        "summary",
        "workbook",
        "guide",
        "analysis",
        "digest",
        "notes",
        "review",
        "study",
        "overview",
        "introduction",
        "commentary",
        "illustrated",
        "abridged",
        "annotated",
        "cliffs",
        "sparknotes",
        "quicklet",
    }
)
