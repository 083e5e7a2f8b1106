"""Edit-distance similarity for typo-tolerant matching.

This module provides Levenshtein distance over code points and the
normalized similarity score the match engine compares against thresholds.
"""

from __future__ import annotations


def levenshtein_distance(s1: str, s2: str) -> int:
    """Count the single code-point edits that turn ``s1`` into ``s2``.

    Insertions, deletions and substitutions each cost 1. Bengali text is
    compared code point by code point, like any other script.

    Examples:
        >>> levenshtein_distance("kitten", "sitting")
        3
        >>> levenshtein_distance("", "abc")
        3
    """
    if not s1 or not s2:
        return len(s1) or len(s2)

    # Iterate the longer string; keep one row the width of the shorter one
    shorter, longer = (s1, s2) if len(s1) <= len(s2) else (s2, s1)
    previous = list(range(len(shorter) + 1))

    for row, long_char in enumerate(longer, start=1):
        current = [row]
        for col, short_char in enumerate(shorter, start=1):
            current.append(
                min(
                    previous[col] + 1,
                    current[col - 1] + 1,
                    previous[col - 1] + (short_char != long_char),
                )
            )
        previous = current

    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Return the normalized edit-distance similarity of two strings in [0, 1].

    ``(max_len - distance) / max_len``, with 1.0 for two empty strings.
    Symmetric in its arguments.

    Examples:
        >>> similarity("habit", "habit")
        1.0
        >>> similarity("kitten", "sitting")
        0.5714285714285714
        >>> similarity("", "")
        1.0
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    if a == b:
        return 1.0
    return (max_len - levenshtein_distance(a, b)) / max_len
