"""Multilingual (Bengali/Latin) fuzzy search for small catalogs."""

from catalog_search.domain.search import (
    DEFAULT_THRESHOLD,
    SEARCH_FIELDS,
    ScoredRecord,
    SearchableRecord,
    SearchOptions,
    SearchResponse,
    SearchStats,
)
from catalog_search.search.analyzers import is_primary_script, normalize_text
from catalog_search.search.engine import MultilingualSearchEngine, search_records
from catalog_search.search.fuzzy import levenshtein_distance, similarity
from catalog_search.search.highlight import highlight
from catalog_search.search.matcher import WORD_MATCH_THRESHOLD, FieldMatch, match_field
from catalog_search.search.suggestions import suggest
from catalog_search.search.tables import DEFAULT_TABLES, LanguageTables
from catalog_search.search.variants import VariantExpander, expand_query_variants
from catalog_search.service_layer.search_service import CatalogSearchService


__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TABLES",
    "DEFAULT_THRESHOLD",
    "SEARCH_FIELDS",
    "WORD_MATCH_THRESHOLD",
    "CatalogSearchService",
    "FieldMatch",
    "LanguageTables",
    "MultilingualSearchEngine",
    "ScoredRecord",
    "SearchOptions",
    "SearchResponse",
    "SearchStats",
    "SearchableRecord",
    "VariantExpander",
    "expand_query_variants",
    "highlight",
    "is_primary_script",
    "levenshtein_distance",
    "match_field",
    "normalize_text",
    "search_records",
    "similarity",
    "suggest",
]
