"""Static language tables for Bengali/Latin query expansion.

Three tables drive variant generation:

- transliteration: Bengali grapheme -> Latin renderings (first is canonical)
- phonetic: Latin fragment -> Bengali grapheme candidates
- domain terms: Bengali catalog vocabulary <-> Latin synonyms

The defaults below are plain dict literals for readability. They are frozen
into a :class:`LanguageTables` once at import time and shared read-only by
every engine instance; nothing mutates them during a search.

New scripts or vocabularies are added by building another
``LanguageTables`` from different data, not by changing the engine.
"""
# ruff: noqa: RUF001  # Bengali letters in the tables are intentional

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from catalog_search.search.analyzers import normalize_text


# Keyed on normalized graphemes; vowel signs, candrabindu, nukta and virama never reach it
DEFAULT_TRANSLITERATION: dict[str, list[str]] = {
    # Independent vowels
    "অ": ["o", "a"],
    "আ": ["a", "aa"],
    "ই": ["i", "ee"],
    "ঈ": ["i", "ee"],
    "উ": ["u", "oo"],
    "ঊ": ["u", "oo"],
    "ঋ": ["ri"],
    "এ": ["e", "ay"],
    "ঐ": ["oi"],
    "ও": ["o", "oh"],
    "ঔ": ["ou"],
    # Consonants
    "ক": ["k", "c"],
    "খ": ["kh"],
    "গ": ["g"],
    "ঘ": ["gh"],
    "ঙ": ["ng"],
    "চ": ["ch", "c"],
    "ছ": ["chh"],
    "জ": ["j"],
    "ঝ": ["jh"],
    "ঞ": ["n"],
    "ট": ["t"],
    "ঠ": ["th"],
    "ড": ["d"],
    "ঢ": ["dh"],
    "ণ": ["n"],
    "ত": ["t"],
    "থ": ["th"],
    "দ": ["d"],
    "ধ": ["dh"],
    "ন": ["n"],
    "প": ["p"],
    "ফ": ["ph", "f"],
    "ব": ["b", "v"],
    "ভ": ["bh"],
    "ম": ["m"],
    "য": ["j", "y"],
    "র": ["r"],
    "ল": ["l"],
    "শ": ["sh", "s"],
    "ষ": ["sh", "s"],
    "স": ["s"],
    "হ": ["h"],
    "ৎ": ["t"],
    "ং": ["ng"],
    "ঃ": ["h"],
}


DEFAULT_PHONETIC: dict[str, list[str]] = {
    # Vowels
    "a": ["আ", "এ"],
    "i": ["ই", "ঈ"],
    "u": ["উ", "ঊ"],
    "e": ["এ", "ই"],
    "o": ["ও", "অ"],
    # Single consonants
    "k": ["ক"],
    "g": ["গ"],
    "ch": ["চ", "ছ"],
    "j": ["জ", "য"],
    "t": ["ত", "ট"],
    "d": ["দ", "ড"],
    "n": ["ন", "ণ"],
    "p": ["প"],
    "b": ["ব"],
    "v": ["ভ", "ব"],
    "m": ["ম"],
    "r": ["র"],
    "l": ["ল"],
    "sh": ["শ", "ষ"],
    "s": ["স", "শ", "ষ"],
    "h": ["হ"],
    "y": ["য"],
    "f": ["ফ"],
    # Aspirates and clusters
    "th": ["থ", "ঠ"],
    "dh": ["ধ", "ঢ"],
    "kh": ["খ"],
    "gh": ["ঘ"],
    "ph": ["ফ"],
    "bh": ["ভ"],
    "ng": ["ং"],
}


# Catalog vocabulary (genres and categories) with their Latin synonyms,
# including common romanized spellings of the Bengali word.
DEFAULT_DOMAIN_TERMS: dict[str, list[str]] = {
    "বই": ["book", "books", "boi"],
    "গল্প": ["story", "golpo", "galpo"],
    "উপন্যাস": ["novel", "uponnash", "uponyas"],
    "কবিতা": ["poem", "poetry", "kobita"],
    "ইতিহাস": ["history", "itihas"],
    "বিজ্ঞান": ["science", "biggan", "vigyan"],
    "গণিত": ["math", "mathematics", "gonit"],
    "ধর্ম": ["religion", "dharma", "dhormmo"],
    "রাজনীতি": ["politics", "rajniti"],
    "অর্থনীতি": ["economics", "orthoniti"],
    "দর্শন": ["philosophy", "dorshon"],
    "মনোবিজ্ঞান": ["psychology", "monobiggan"],
    "সাহিত্য": ["literature", "sahitya"],
    "প্রবন্ধ": ["essay", "probondho"],
    "আত্মজীবনী": ["biography", "autobiography", "atmojiboni"],
    "রহস্য": ["mystery", "rohoshsho"],
    "রোমান্স": ["romance", "romantic"],
    "কল্পবিজ্ঞান": ["science fiction", "sci-fi", "kolpobiggan"],
    "ভ্রমণ": ["travel", "bhromon"],
    "রান্না": ["cooking", "recipe", "ranna"],
    "স্বাস্থ্য": ["health", "shasthyo"],
    "শিশু": ["children", "kids", "shishu"],
    "তরুণ": ["young adult", "teenage", "tarun"],
    "প্রাপ্তবয়স্ক": ["adult", "praptoboyoshko"],
}


def _freeze(table: Mapping[str, Sequence[str]], *, normalize_keys: bool, normalize_values: bool):
    frozen: dict[str, tuple[str, ...]] = {}
    for key, values in table.items():
        frozen_key = normalize_text(key) if normalize_keys else key
        if not frozen_key:
            continue
        candidates = tuple(normalize_text(value) if normalize_values else value for value in values)
        existing = frozen.get(frozen_key, ())
        # Keys that collide after normalization merge, keeping first-seen order
        frozen[frozen_key] = existing + tuple(c for c in candidates if c not in existing)
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class LanguageTables:
    """Immutable bundle of the three lookup tables.

    Build instances with :meth:`build`, which normalizes domain-term keys and
    synonyms with :func:`normalize_text` so they compare equal to normalized
    queries (for example, virama-bearing Bengali words).
    """

    transliteration: Mapping[str, tuple[str, ...]]
    phonetic: Mapping[str, tuple[str, ...]]
    domain_terms: Mapping[str, tuple[str, ...]]

    @classmethod
    def build(
        cls,
        transliteration: Mapping[str, Sequence[str]] | None = None,
        phonetic: Mapping[str, Sequence[str]] | None = None,
        domain_terms: Mapping[str, Sequence[str]] | None = None,
    ) -> LanguageTables:
        """Freeze table data, defaulting each table to the built-in one."""
        return cls(
            transliteration=_freeze(
                DEFAULT_TRANSLITERATION if transliteration is None else transliteration,
                normalize_keys=False,
                normalize_values=False,
            ),
            phonetic=_freeze(
                DEFAULT_PHONETIC if phonetic is None else phonetic,
                normalize_keys=False,
                normalize_values=False,
            ),
            domain_terms=_freeze(
                DEFAULT_DOMAIN_TERMS if domain_terms is None else domain_terms,
                normalize_keys=True,
                normalize_values=True,
            ),
        )

    def transliterate(self, grapheme: str) -> str | None:
        """Return the canonical Latin rendering of a grapheme, or None if unmapped."""
        candidates = self.transliteration.get(grapheme)
        return candidates[0] if candidates else None


DEFAULT_TABLES = LanguageTables.build()
