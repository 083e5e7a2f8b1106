"""Query variant expansion across Bengali and Latin script.

A query is rewritten into extra probes before matching:

- "উপন্যাস" expands to {"উপনযস", "novel", "uponnash", "uponyas", "upnjs"}
- "novel" expands to {"novel", "উপনযস", "novএl", "novইl", ...}

Overlapping or contradictory variants are all kept; the ranker only keeps
the best score per record.
"""

from __future__ import annotations

from catalog_search.search.analyzers import is_primary_script, normalize_text, split_words
from catalog_search.search.tables import DEFAULT_TABLES, LanguageTables


class VariantExpander:
    """Expands a normalized query into alternate spellings.

    The tables are shared read-only, so one expander can serve any number
    of threads.
    """

    def __init__(self, tables: LanguageTables | None = None) -> None:
        """Initialize with language tables.

        Args:
            tables: Table bundle to expand with. If None, uses DEFAULT_TABLES.
        """
        self.tables = tables if tables is not None else DEFAULT_TABLES

    def expand(
        self,
        normalized_query: str,
        *,
        include_transliteration: bool = True,
        include_phonetic: bool = True,
    ) -> list[str]:
        """Expand a normalized query into its variant set.

        Args:
            normalized_query: Query already passed through normalize_text.
            include_transliteration: Run the script-conversion pass.
            include_phonetic: Run phonetic expansion for Latin queries. Only
                applies when include_transliteration is also set.

        Returns:
            De-duplicated variants in generation order. The query itself is
            always first.
        """
        variants: dict[str, None] = {normalized_query: None}
        primary = is_primary_script(normalized_query)

        for variant in self.domain_term_variants(normalized_query, primary=primary):
            variants.setdefault(variant, None)

        if include_transliteration:
            if primary:
                transliterated = self.transliterate(normalized_query)
                if transliterated:
                    variants.setdefault(transliterated, None)
            elif include_phonetic:
                for variant in self.phonetic_variants(normalized_query):
                    variants.setdefault(variant, None)

        return list(variants)

    def domain_term_variants(self, normalized_query: str, *, primary: bool) -> list[str]:
        """Translate catalog vocabulary found anywhere in the query.

        A Bengali query containing a table key yields that key's Latin
        synonyms. A Latin query containing any synonym yields the Bengali
        key. Matching is by substring, so "history" also contains "story".
        """
        found: list[str] = []
        if not normalized_query:
            return found
        for term, synonyms in self.tables.domain_terms.items():
            if primary:
                if term in normalized_query:
                    found.extend(synonyms)
            else:
                found.extend(term for synonym in synonyms if synonym in normalized_query)
        return found

    def transliterate(self, normalized_query: str) -> str:
        """Render Bengali text in Latin letters using each grapheme's first candidate."""
        parts: list[str] = []
        for char in normalized_query:
            rendered = self.tables.transliterate(char)
            parts.append(char if rendered is None else rendered)
        return "".join(parts)

    def phonetic_variants(self, normalized_query: str) -> list[str]:
        """Generate Bengali-substituted spellings for each word of a Latin query.

        Every phonetic key found inside a word yields one variant per
        candidate, with the first occurrence of the key replaced. Keys are
        scanned in table order, not longest-match-first, so "sh" and "s" both
        fire inside "shadow".
        """
        found: list[str] = []
        for word in split_words(normalized_query):
            for fragment, candidates in self.tables.phonetic.items():
                if fragment in word:
                    found.extend(word.replace(fragment, candidate, 1) for candidate in candidates)
        return found


def expand_query_variants(
    query: str,
    *,
    tables: LanguageTables | None = None,
    include_transliteration: bool = True,
    include_phonetic: bool = True,
) -> list[str]:
    """Normalize ``query`` and expand it into variants.

    Returns an empty list when the query normalizes to nothing.
    """
    normalized = normalize_text(query)
    if not normalized:
        return []
    expander = VariantExpander(tables)
    return expander.expand(
        normalized,
        include_transliteration=include_transliteration,
        include_phonetic=include_phonetic,
    )
