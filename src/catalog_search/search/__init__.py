"""
Multilingual fuzzy search package.

This package provides a pure-Python, read-only search stack:
- analyzers: Text normalization and script detection
- tables: Transliteration, phonetic and domain-term tables
- variants: Cross-script query variant expansion
- fuzzy: Levenshtein distance and normalized similarity
- matcher: Field-level substring / fuzzy word matching
- engine: Ranked search over record collections
- suggestions: Type-ahead completions
- highlight: Match highlighting for display text
"""
