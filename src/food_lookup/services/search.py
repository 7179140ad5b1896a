"""Food search over the reference nutrition table."""

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Protocol

from food_lookup.domain.foods import FoodRecord

MIN_QUERY_LENGTH = 2
INLINE_RESULT_LIMIT = 30
COMPACT_RESULT_LIMIT = 20
CANDIDATE_FETCH_LIMIT = 500

_logger = logging.getLogger(__name__)


class FoodCandidateSource(Protocol):
    """Source of candidate rows for local search."""

    def list_foods(self, limit: int | None = None) -> list[FoodRecord]:
        """Return up to ``limit`` foods ordered by name ascending."""


@dataclass(frozen=True)
class TextSegment:
    """A piece of display text, flagged when it matches the search string."""

    text: str
    highlighted: bool


def normalize_text(text: str) -> str:
    """Fold case and diacritics and turn commas into word boundaries."""
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(char for char in decomposed if not unicodedata.combining(char))
    return " ".join(stripped.replace(",", " ").split())


def search_foods(
    query: str, candidates: list[FoodRecord], limit: int = INLINE_RESULT_LIMIT
) -> list[FoodRecord]:
    """Return candidates containing every query word, best matches first.

    Names starting with the first query word rank ahead of the rest; each group
    is sorted alphabetically by normalized name.
    """
    normalized_query = normalize_text(query)
    if len(normalized_query) < MIN_QUERY_LENGTH:
        return []
    words = normalized_query.split()
    first_word = words[0]

    matches: list[tuple[bool, str, FoodRecord]] = []
    for food in candidates:
        name = normalize_text(food.name)
        if all(word in name for word in words):
            matches.append((not name.startswith(first_word), name, food))

    matches.sort(key=lambda match: (match[0], match[1]))
    return [food for _, _, food in matches[:limit]]


def highlight_segments(text: str, search: str) -> list[TextSegment]:
    """Split ``text`` around case-insensitive occurrences of ``search``."""
    if not search or len(search) < MIN_QUERY_LENGTH:
        return [TextSegment(text=text, highlighted=False)]
    pattern = re.compile(f"({re.escape(search)})", re.IGNORECASE)
    # With one capturing group, odd indexes are the matched parts.
    return [
        TextSegment(text=part, highlighted=index % 2 == 1)
        for index, part in enumerate(pattern.split(text))
        if part
    ]


@dataclass
class FoodSearchService:
    """Searches foods locally over a bounded candidate fetch."""

    source: FoodCandidateSource
    fetch_limit: int = CANDIDATE_FETCH_LIMIT

    async def search(
        self, query: str, limit: int = INLINE_RESULT_LIMIT
    ) -> list[FoodRecord]:
        """Return ranked foods for a query, or an empty list on failure."""
        if len(normalize_text(query)) < MIN_QUERY_LENGTH:
            return []
        try:
            candidates = self.source.list_foods(limit=self.fetch_limit)
        except Exception:
            _logger.exception("Failed to fetch food candidates: query=%s", query)
            return []
        results = search_foods(query, candidates, limit=limit)
        _logger.debug(
            "Food search: query=%s candidates=%s results=%s",
            query,
            len(candidates),
            len(results),
        )
        return results
