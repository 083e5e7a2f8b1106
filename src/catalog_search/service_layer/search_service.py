"""Catalog search orchestration layer.

Wraps the ranked engine with storefront concerns: attribute filters,
sort orders, result limits, and the logging/metrics/tracing every call
gets. The engine itself stays pure; this layer is what applications call.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
import time
from typing import Any

from catalog_search.config import Settings
from catalog_search.domain.search import (
    ScoredRecord,
    SearchableRecord,
    SearchOptions,
    SearchResponse,
    SearchStats,
    SortOrder,
)
from catalog_search.observability.context import get_trace_context, set_trace_context
from catalog_search.observability.metrics import QUERY_VARIANTS, SEARCH_LATENCY, SEARCH_REQUESTS, track_latency
from catalog_search.observability.tracing import create_span
from catalog_search.search.analyzers import is_primary_script
from catalog_search.search.engine import MultilingualSearchEngine
from catalog_search.search.highlight import highlight
from catalog_search.search.suggestions import suggest


logger = logging.getLogger(__name__)

SORT_ORDERS: tuple[str, ...] = ("relevance", "featured", "title", "author", "price-low", "price-high", "rating")


def _number_in_extra(result: ScoredRecord, key: str) -> float | None:
    value = result.record.extra.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def apply_filters(results: list[ScoredRecord], filters: Mapping[str, Any] | None) -> list[ScoredRecord]:
    """Keep results whose field or ``extra`` value equals every filter value."""
    if not filters:
        return results
    return [
        result
        for result in results
        if all(result.record.lookup(key) == expected for key, expected in filters.items())
    ]


def _sort_by_number(results: list[ScoredRecord], key: str, *, descending: bool) -> list[ScoredRecord]:
    valued = [result for result in results if _number_in_extra(result, key) is not None]
    missing = [result for result in results if _number_in_extra(result, key) is None]
    valued.sort(key=lambda result: _number_in_extra(result, key), reverse=descending)
    return valued + missing


def sort_results(results: list[ScoredRecord], sort_by: SortOrder | str) -> list[ScoredRecord]:
    """Reorder results for display; every order is stable.

    ``relevance`` and ``featured`` keep the engine's ranking. The price and
    ``rating`` (highest first) orders push records without a usable
    ``extra["price"]`` or ``extra["rating"]`` to the end.
    """
    if sort_by in ("relevance", "featured"):
        return list(results)
    if sort_by == "title":
        return sorted(results, key=lambda result: result.record.title.casefold())
    if sort_by == "author":
        return sorted(results, key=lambda result: result.record.author.casefold())
    if sort_by in ("price-low", "price-high"):
        return _sort_by_number(results, "price", descending=sort_by == "price-high")
    if sort_by == "rating":
        return _sort_by_number(results, "rating", descending=True)
    msg = f"Unknown sort order '{sort_by}'. Available: {list(SORT_ORDERS)}"
    raise ValueError(msg)


class CatalogSearchService:
    """High-level catalog search service.

    Coordinates the multilingual engine with settings-driven defaults and
    observability. Safe to share across threads.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        engine: MultilingualSearchEngine | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            settings: Configuration; loaded from the environment when omitted.
            engine: Engine to delegate to; built from settings when omitted.
        """
        self.settings = settings or Settings()
        self.engine = engine or MultilingualSearchEngine(max_input_chars=self.settings.max_input_chars)
        self.default_options = self.settings.to_search_options()

    def _bind_catalog(self) -> None:
        ctx = get_trace_context()
        set_trace_context(ctx["trace_id"], ctx["span_id"], catalog=self.settings.catalog_name)

    def expand_query(self, query: str, options: SearchOptions | None = None) -> list[str]:
        """Return the variants the engine would probe for ``query``."""
        return self.engine.expand_query(query, options or self.default_options)

    def search(
        self,
        records: Iterable[SearchableRecord],
        query: str,
        *,
        options: SearchOptions | None = None,
        filters: Mapping[str, Any] | None = None,
        sort_by: SortOrder | str = "relevance",
        limit: int | None = None,
    ) -> SearchResponse:
        """Search, filter, sort and truncate a catalog.

        Args:
            records: Catalog records (read-only to the service).
            query: User query in Bengali or Latin script; may be empty.
            options: Per-call options; defaults come from settings.
            filters: Exact-equality filters on record fields or ``extra`` keys.
            sort_by: Display order, see SORT_ORDERS.
            limit: Maximum number of results returned.

        Returns:
            SearchResponse with ranked results and statistics.
        """
        opts = options or self.default_options
        items = list(records)
        self._bind_catalog()

        start = time.perf_counter()
        with (
            create_span(
                "catalog.search",
                attributes={"search.query_length": len(query), "search.record_count": len(items)},
            ) as span,
            track_latency(SEARCH_LATENCY, operation="search"),
        ):
            try:
                variants = self.engine.expand_query(query, opts)
                ranked = self.engine.search(items, query, opts, variants=variants)
                results = sort_results(apply_filters(ranked, filters), sort_by)
            except Exception:
                SEARCH_REQUESTS.labels(operation="search", outcome="error").inc()
                logger.exception("Catalog search failed")
                raise
            if limit is not None:
                results = results[: max(limit, 0)]
            span.set_attribute("search.variant_count", len(variants))
            span.set_attribute("search.result_count", len(results))

        elapsed = time.perf_counter() - start
        script = "bengali" if is_primary_script(query) else "latin"
        QUERY_VARIANTS.labels(script=script).observe(len(variants))
        SEARCH_REQUESTS.labels(operation="search", outcome="hit" if results else "miss").inc()

        logger.debug(
            "Catalog search completed",
            extra={
                "variant_count": len(variants),
                "result_count": len(results),
                "record_count": len(items),
                "script": script,
            },
        )

        return SearchResponse(
            query=query,
            results=results,
            stats=SearchStats(
                total_records=len(items),
                matched_records=len(results),
                variant_count=len(variants),
                search_time=elapsed,
            ),
        )

    def suggest(
        self,
        records: Iterable[SearchableRecord],
        partial_query: str,
        max_suggestions: int | None = None,
    ) -> list[str]:
        """Return type-ahead suggestions, defaulting the count to settings."""
        limit = self.settings.max_suggestions if max_suggestions is None else max_suggestions
        self._bind_catalog()
        with create_span("catalog.suggest"), track_latency(SEARCH_LATENCY, operation="suggest"):
            suggestions = suggest(records, partial_query, limit)
        SEARCH_REQUESTS.labels(operation="suggest", outcome="hit" if suggestions else "miss").inc()
        return suggestions

    def highlight(self, text: str, query: str) -> str:
        """Highlight ``query`` in ``text`` with the configured marker style."""
        return highlight(text, query, style=self.settings.highlight_style)
