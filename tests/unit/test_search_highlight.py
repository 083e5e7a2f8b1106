"""Unit tests for query highlighting."""

import pytest

from catalog_search.search.highlight import highlight


@pytest.mark.unit
class TestHighlight:
    """Tests for highlight."""

    def test_wraps_match_preserving_case(self):
        assert highlight("Atomic Habits", "atomic") == "<mark>Atomic</mark> Habits"

    def test_wraps_every_occurrence(self):
        assert highlight("Habits make habits", "HABITS") == "<mark>Habits</mark> make <mark>habits</mark>"

    def test_plain_style(self):
        assert highlight("Atomic Habits", "atomic", style="plain") == "[[Atomic]] Habits"

    def test_query_is_normalized(self):
        assert highlight("Atomic Habits", "  ATOMIC   habits ") == "<mark>Atomic Habits</mark>"

    @pytest.mark.parametrize("query", ["", "   "])
    def test_empty_query_returns_text_unchanged(self, query):
        assert highlight("Atomic Habits", query) == "Atomic Habits"

    def test_no_match_returns_text_unchanged(self):
        assert highlight("Atomic Habits", "orwell") == "Atomic Habits"

    def test_regex_metacharacters_are_literal(self):
        assert highlight("C++ Primer (5th)", "c++") == "<mark>C++</mark> Primer (5th)"
        assert highlight("a.b axb", "a.b") == "<mark>a.b</mark> axb"
        assert highlight("Price (USD)", "(usd)") == "Price <mark>(USD)</mark>"

    def test_idempotent(self):
        once = highlight("Habits make habits", "habits")
        assert highlight(once, "habits") == once

    def test_idempotent_plain(self):
        once = highlight("Atomic Habits", "atomic", style="plain")
        assert highlight(once, "atomic", style="plain") == once

    def test_bengali_text(self):
        assert highlight("বই মেলা", "বই") == "<mark>বই</mark> মেলা"

    def test_unknown_style_rejected(self):
        with pytest.raises(ValueError, match="Unknown highlight style"):
            highlight("Atomic Habits", "atomic", style="bold")  # type: ignore[arg-type]
