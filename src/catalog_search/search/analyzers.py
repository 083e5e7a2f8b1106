"""Text normalization and script detection.

Every comparison the engine makes runs on the output of
:func:`normalize_text`, so query variants, table keys and record fields all
share one canonical form:

- lower-cased
- Bengali vowel signs, candrabindu, nukta and virama removed
- Latin (and other non-Bengali) combining diacritics removed
- whitespace runs collapsed to a single space and trimmed
"""

from __future__ import annotations

import re
import unicodedata


BENGALI_BLOCK_START = 0x0980
BENGALI_BLOCK_END = 0x09FF

# Dependent vowel signs (aa..au, au length mark, vocalic l/ll)
BENGALI_VOWEL_SIGNS = frozenset(
    [chr(code) for code in range(0x09BE, 0x09CD) if unicodedata.category(chr(code)) in ("Mn", "Mc")]
    + ["\u09d7", "\u09e2", "\u09e3"]
)

# Candrabindu, nukta, virama and the vowel signs
BENGALI_STRIPPED_MARKS = frozenset("\u0981\u09bc\u09cd") | BENGALI_VOWEL_SIGNS

_BENGALI_PATTERN = re.compile(r"[\u0980-\u09ff]")
_WHITESPACE_PATTERN = re.compile(r"\s+", re.UNICODE)


def _fold_char(char: str) -> str:
    if char.isascii():
        return char
    if BENGALI_BLOCK_START <= ord(char) <= BENGALI_BLOCK_END:
        return "" if char in BENGALI_STRIPPED_MARKS else char
    # NFKD splits base + combining marks; keep the base characters only
    return "".join(part for part in unicodedata.normalize("NFKD", char) if not unicodedata.combining(part))


def normalize_text(text: str) -> str:
    """Return the canonical search form of ``text``.

    Total over any string: empty and whitespace-only input normalize to ``""``.
    Canonically equivalent spellings (precomposed or base + nukta Bengali
    letters, for example) normalize to the same string.

    Examples:
        >>> normalize_text("  Café   Society ")
        'cafe society'
    """
    if not text:
        return ""
    # NFD first: U+09DC, U+09DD and U+09DF become base letter + nukta
    decomposed = unicodedata.normalize("NFD", text.lower())
    folded = "".join(_fold_char(char) for char in decomposed)
    return _WHITESPACE_PATTERN.sub(" ", folded).strip()


def split_words(normalized: str) -> list[str]:
    """Split normalized text into words (empty text yields no words)."""
    return normalized.split()


def is_primary_script(text: str) -> bool:
    """Return True if ``text`` contains at least one Bengali code point.

    Mixed-script strings count as primary; this only picks an expansion
    path and is not a validator.
    """
    return bool(text) and _BENGALI_PATTERN.search(text) is not None
