"""Domain layer: value objects for catalog search."""

from catalog_search.domain.search import (
    DEFAULT_THRESHOLD,
    SEARCH_FIELDS,
    ScoredRecord,
    SearchableRecord,
    SearchField,
    SearchOptions,
    SearchResponse,
    SearchStats,
    SortOrder,
)


__all__ = [
    "DEFAULT_THRESHOLD",
    "SEARCH_FIELDS",
    "ScoredRecord",
    "SearchField",
    "SearchOptions",
    "SearchResponse",
    "SearchStats",
    "SearchableRecord",
    "SortOrder",
]
