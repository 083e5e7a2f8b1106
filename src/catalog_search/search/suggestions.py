"""Type-ahead suggestions drawn from the catalog itself."""

from __future__ import annotations

from collections.abc import Iterable

from catalog_search.domain.search import SEARCH_FIELDS, SearchableRecord
from catalog_search.search.analyzers import normalize_text, split_words


MIN_PARTIAL_LENGTH = 2
DEFAULT_MAX_SUGGESTIONS = 5


def suggest(
    records: Iterable[SearchableRecord],
    partial_query: str,
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
) -> list[str]:
    """Return completion candidates for ``partial_query``.

    Walks title, author, description and category of every record in order.
    A normalized word that starts with the partial query and is strictly
    longer than it is a candidate; so is the whole original field text when
    its normalized form contains the partial query anywhere. Candidates are
    de-duplicated in insertion order with no further ranking.

    Args:
        records: Catalog records to draw from.
        partial_query: What the user has typed so far.
        max_suggestions: Upper bound on returned candidates.

    Returns:
        Up to ``max_suggestions`` strings; empty when the normalized partial
        query is shorter than two characters.
    """
    prefix = normalize_text(partial_query)
    if len(prefix) < MIN_PARTIAL_LENGTH or max_suggestions <= 0:
        return []

    suggestions: dict[str, None] = {}
    for record in records:
        for field_name in SEARCH_FIELDS:
            text = record.field_text(field_name)
            if not text:
                continue
            normalized = normalize_text(text)

            for word in split_words(normalized):
                if word.startswith(prefix) and len(word) > len(prefix):
                    suggestions.setdefault(word, None)

            if prefix in normalized:
                suggestions.setdefault(text, None)

            if len(suggestions) >= max_suggestions:
                return list(suggestions)[:max_suggestions]

    return list(suggestions)[:max_suggestions]
