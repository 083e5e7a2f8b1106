"""Unit tests for query variant expansion."""

import pytest

from catalog_search.search.analyzers import normalize_text
from catalog_search.search.tables import LanguageTables
from catalog_search.search.variants import VariantExpander, expand_query_variants


NOVEL_BN = normalize_text("উপন্যাস")
HISTORY_BN = normalize_text("ইতিহাস")
STORY_BN = normalize_text("গল্প")


@pytest.mark.unit
class TestExpandQueryVariants:
    """Tests for expand_query_variants."""

    def test_empty_query_has_no_variants(self):
        assert expand_query_variants("") == []
        assert expand_query_variants("   ") == []

    def test_query_itself_comes_first(self):
        variants = expand_query_variants("  Atomic ")
        assert variants[0] == "atomic"

    def test_bengali_query_expands_to_synonyms_and_transliteration(self):
        assert expand_query_variants("উপন্যাস") == [NOVEL_BN, "novel", "uponnash", "uponyas", "upnjs"]

    def test_latin_query_expands_to_bengali_term(self):
        variants = expand_query_variants("novel")
        assert variants[:2] == ["novel", NOVEL_BN]

    def test_variants_are_unique(self):
        variants = expand_query_variants("science fiction novel")
        assert len(variants) == len(set(variants))

    def test_overlapping_domain_terms_all_fire(self):
        variants = expand_query_variants("history")
        assert HISTORY_BN in variants
        assert STORY_BN in variants

    def test_transliteration_disabled_keeps_domain_terms(self):
        variants = expand_query_variants("উপন্যাস", include_transliteration=False)
        assert variants == [NOVEL_BN, "novel", "uponnash", "uponyas"]

    def test_phonetic_needs_transliteration(self):
        assert expand_query_variants("m", include_transliteration=False) == ["m"]
        assert expand_query_variants("m", include_phonetic=False) == ["m"]
        assert expand_query_variants("m") == ["m", "ম"]


@pytest.mark.unit
class TestVariantExpander:
    """Tests for VariantExpander passes."""

    def test_transliterate_walks_code_points(self):
        expander = VariantExpander()
        assert expander.transliterate(normalize_text("বাংলা")) == "bngl"

    def test_transliterate_keeps_unmapped_characters(self):
        expander = VariantExpander()
        assert expander.transliterate("বই 2") == "bi 2"

    def test_phonetic_variants_replace_first_occurrence_once(self):
        expander = VariantExpander(LanguageTables.build(phonetic={"a": ["আ"]}))
        assert expander.phonetic_variants("banana") == ["bআnana"]

    def test_phonetic_variants_fire_overlapping_keys(self):
        variants = VariantExpander().phonetic_variants("shadow")
        assert "শadow" in variants
        assert "ষadow" in variants
        assert "সhadow" in variants
        assert "sহadow" in variants

    def test_phonetic_variants_are_per_word(self):
        expander = VariantExpander(LanguageTables.build(phonetic={"m": ["ম"]}))
        assert expander.phonetic_variants("mad men") == ["মad", "মen"]

    def test_domain_terms_latin_direction(self):
        expander = VariantExpander()
        assert expander.domain_term_variants("a good book", primary=False) == [normalize_text("বই")]

    def test_domain_terms_bengali_direction(self):
        expander = VariantExpander()
        kobita = normalize_text("কবিতা")
        assert expander.domain_term_variants(kobita, primary=True) == ["poem", "poetry", "kobita"]

    def test_custom_tables(self):
        tables = LanguageTables.build(transliteration={}, phonetic={}, domain_terms={"libro": ["book"]})
        expander = VariantExpander(tables)
        assert expander.expand("my book") == ["my book", "libro"]
