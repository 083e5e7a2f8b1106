"""Highlight query matches inside display text.

Smart defaults:
- Matches are case-insensitive and regex metacharacters in the query are
  escaped.
- The original (non-normalized) text is preserved around each match.
- Spans already wrapped in a marker are left alone, so highlighting twice
  gives the same result as highlighting once.
"""

from __future__ import annotations

import re
from typing import Literal

from catalog_search.search.analyzers import normalize_text


HighlightStyle = Literal["html", "plain"]

MARKERS: dict[str, tuple[str, str]] = {
    "html": ("<mark>", "</mark>"),
    "plain": ("[[", "]]"),
}


def _find_marked_regions(text: str) -> list[tuple[int, int]]:
    """Return (start, end) spans already wrapped in any known marker."""
    regions: list[tuple[int, int]] = []
    for opener, closer in MARKERS.values():
        pattern = re.compile(re.escape(opener) + r".*?" + re.escape(closer), re.DOTALL)
        regions.extend((match.start(), match.end()) for match in pattern.finditer(text))
    return regions


def _is_inside_protected_region(start: int, end: int, protected_regions: list[tuple[int, int]]) -> bool:
    """Check if a match position overlaps with any protected region."""
    return any(start < region_end and end > region_start for region_start, region_end in protected_regions)


def highlight(text: str, query: str, style: HighlightStyle = "html") -> str:
    """Wrap every occurrence of the normalized query in ``text`` with a marker.

    Args:
        text: Original display text (not normalized).
        query: User query; normalized before searching.
        style: "html" for <mark>match</mark> or "plain" for [[match]].

    Returns:
        The highlighted text, or ``text`` unchanged when the query
        normalizes to nothing.
    """
    normalized_query = normalize_text(query)
    if not normalized_query or not text:
        return text

    if style not in MARKERS:
        msg = f"Unknown highlight style '{style}'. Available: {sorted(MARKERS)}"
        raise ValueError(msg)
    opener, closer = MARKERS[style]

    protected_regions = _find_marked_regions(text)
    pattern = re.compile(re.escape(normalized_query), re.IGNORECASE)

    pieces: list[str] = []
    cursor = 0
    for match in pattern.finditer(text):
        start, end = match.span()
        if _is_inside_protected_region(start, end, protected_regions):
            continue
        pieces.append(text[cursor:start])
        pieces.append(f"{opener}{match.group(0)}{closer}")
        cursor = end

    if not pieces:
        return text
    pieces.append(text[cursor:])
    return "".join(pieces)
