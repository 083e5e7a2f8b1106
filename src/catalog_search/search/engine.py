"""Ranked multilingual search over a record collection.

The engine ties the pieces together::

    query -> normalize -> expand variants -> match every (field, variant)
          -> best score per record -> stable sort by descending score

It holds no per-call state. The language tables are shared read-only, so a
single engine can serve concurrent searches from any number of threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

from catalog_search.domain.search import ScoredRecord, SearchableRecord, SearchOptions
from catalog_search.search.analyzers import normalize_text
from catalog_search.search.matcher import DEFAULT_MAX_INPUT_CHARS, WORD_MATCH_THRESHOLD, match_normalized
from catalog_search.search.tables import DEFAULT_TABLES, LanguageTables
from catalog_search.search.variants import VariantExpander


logger = logging.getLogger(__name__)


class MultilingualSearchEngine:
    """Fuzzy, script-aware ranker for catalog records."""

    def __init__(
        self,
        tables: LanguageTables | None = None,
        *,
        max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
    ) -> None:
        """Initialize the engine.

        Args:
            tables: Language tables shared by every search. Defaults to DEFAULT_TABLES.
            max_input_chars: Cap on characters fed to the fuzzy word stage.
        """
        self.tables = tables if tables is not None else DEFAULT_TABLES
        self.expander = VariantExpander(self.tables)
        self.max_input_chars = max_input_chars

    def expand_query(self, query: str, options: SearchOptions | None = None) -> list[str]:
        """Return the normalized, de-duplicated variants probed for ``query``."""
        opts = options or SearchOptions()
        normalized = normalize_text(query)
        if not normalized:
            return []
        expanded = self.expander.expand(
            normalized,
            include_transliteration=opts.include_transliteration,
            include_phonetic=opts.include_phonetic,
        )
        variants: dict[str, None] = {}
        for variant in expanded:
            canonical = normalize_text(variant)
            if canonical:
                variants.setdefault(canonical, None)
        return list(variants)

    def search(
        self,
        records: Iterable[SearchableRecord],
        query: str,
        options: SearchOptions | None = None,
        *,
        variants: Sequence[str] | None = None,
    ) -> list[ScoredRecord]:
        """Rank ``records`` against ``query``.

        An empty (after normalization) query is a no-op: every record comes
        back with score 0.0 in its original order. Otherwise records with no
        matching (field, variant) pair are dropped and the rest are sorted by
        descending score; ties keep input order.

        Callers that already hold ``expand_query(query, options)`` can pass it
        as ``variants`` to skip a second expansion.
        """
        opts = options or SearchOptions()
        items = list(records)

        if not normalize_text(query):
            return [ScoredRecord(record=record, score=0.0) for record in items]

        if variants is None:
            variants = self.expand_query(query, opts)
        results: list[ScoredRecord] = []
        for record in items:
            score = self.score_record(record, variants, opts)
            if score is not None:
                results.append(ScoredRecord(record=record, score=score))

        # sorted() is stable, so equal scores keep input order
        ranked = sorted(results, key=lambda result: result.score, reverse=True)

        logger.debug(
            "Search ranked %d of %d records using %d variants",
            len(ranked),
            len(items),
            len(variants),
        )
        return ranked

    def score_record(
        self,
        record: SearchableRecord,
        variants: Sequence[str],
        options: SearchOptions,
    ) -> float | None:
        """Return the best matching score for ``record``, or None when nothing matched.

        ``variants`` must already be normalized (see :meth:`expand_query`).
        """
        best_score = 0.0
        has_match = False

        for field_name in options.search_fields:
            value = record.field_text(field_name)
            if value is None:
                continue
            text = normalize_text(value)

            for variant in variants:
                result = match_normalized(
                    text,
                    variant,
                    options.threshold,
                    word_threshold=WORD_MATCH_THRESHOLD,
                    max_input_chars=self.max_input_chars,
                )
                if result.matched:
                    has_match = True
                    best_score = max(best_score, result.score)
                    if best_score >= 1.0:
                        return best_score

        return best_score if has_match else None


_default_engine = MultilingualSearchEngine()


def search_records(
    records: Iterable[SearchableRecord],
    query: str,
    options: SearchOptions | None = None,
) -> list[ScoredRecord]:
    """Rank ``records`` with a shared default engine."""
    return _default_engine.search(records, query, options)
