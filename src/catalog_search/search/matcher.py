"""Field-level matching of one query variant against one record field.

Two separate thresholds apply:

``WORD_MATCH_THRESHOLD`` (0.6, fixed)
    Minimum best similarity for a single query word to count as matched.

``threshold`` (caller supplied, default 0.4)
    Minimum averaged word score for the whole field to count as matched.
"""

from __future__ import annotations

from typing import Literal, NamedTuple

from catalog_search.search.analyzers import normalize_text, split_words
from catalog_search.search.fuzzy import similarity


WORD_MATCH_THRESHOLD = 0.6
DEFAULT_MAX_INPUT_CHARS = 4096

MatchStrategy = Literal["none", "substring", "fuzzy"]


class FieldMatch(NamedTuple):
    """Outcome of matching one field against one query variant."""

    matched: bool
    score: float
    strategy: MatchStrategy


NO_MATCH = FieldMatch(False, 0.0, "none")


def match_normalized(
    text: str,
    query: str,
    threshold: float,
    *,
    word_threshold: float = WORD_MATCH_THRESHOLD,
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
) -> FieldMatch:
    """Match already-normalized strings; see :func:`match_field`."""
    if not query:
        return NO_MATCH

    if query in text:
        return FieldMatch(True, 1.0, "substring")

    # Word-level fuzzy stage is quadratic; bound the input it sees
    text_words = split_words(text[:max_input_chars])
    query_words = split_words(query[:max_input_chars])
    if not text_words or not query_words:
        return FieldMatch(False, 0.0, "fuzzy")

    matched_words = 0
    total_score = 0.0
    for query_word in query_words:
        best = max(similarity(text_word, query_word) for text_word in text_words)
        if best >= word_threshold:
            matched_words += 1
        total_score += best

    if matched_words == 0:
        return FieldMatch(False, 0.0, "fuzzy")

    score = total_score / len(query_words)
    return FieldMatch(score >= threshold, score, "fuzzy")


def match_field(
    field_text: str,
    query_variant: str,
    threshold: float,
    *,
    word_threshold: float = WORD_MATCH_THRESHOLD,
    max_input_chars: int = DEFAULT_MAX_INPUT_CHARS,
) -> FieldMatch:
    """Decide whether ``field_text`` matches ``query_variant``.

    Strategies run in priority order:

    1. Substring: the normalized field contains the normalized variant,
       giving ``(True, 1.0)``.
    2. Fuzzy words: each query word takes its best similarity against any
       field word and counts when that reaches ``word_threshold``. The score
       is the mean of those best similarities (0.0 when no word counted), and
       the field matches when some word counted and the score reaches
       ``threshold``.

    An empty variant matches nothing with score 0.0; it is never a wildcard.

    Args:
        field_text: Raw field text.
        query_variant: Raw or normalized query variant.
        threshold: Caller ranking threshold for the averaged score.
        word_threshold: Per-word cut-off, WORD_MATCH_THRESHOLD unless overridden.
        max_input_chars: Character cap applied to both inputs in the fuzzy stage.

    Returns:
        FieldMatch(matched, score, strategy).
    """
    return match_normalized(
        normalize_text(field_text),
        normalize_text(query_variant),
        threshold,
        word_threshold=word_threshold,
        max_input_chars=max_input_chars,
    )
