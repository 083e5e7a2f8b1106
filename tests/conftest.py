"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from catalog_search.domain.search import SearchableRecord  # noqa: E402


# Complete test environment that overrides every configurable value
TEST_ENV = {
    "CATALOG_NAME": "Test Catalog",
    "SEARCH_THRESHOLD": "0.4",
    "SEARCH_FIELDS": "title,author,description,category",
    "INCLUDE_TRANSLITERATION": "true",
    "INCLUDE_PHONETIC": "true",
    "MAX_INPUT_CHARS": "4096",
    "MAX_SUGGESTIONS": "5",
    "HIGHLIGHT_STYLE": "html",
    "LOG_LEVEL": "warning",
    "LOG_JSON": "true",
}

os.environ.update(TEST_ENV)


@pytest.fixture
def scenario_records() -> list[SearchableRecord]:
    """The two-book catalog used throughout the behavioural scenarios."""
    return [
        SearchableRecord(id="1", title="Atomic Habits", author="James Clear"),
        SearchableRecord(id="2", title="1984", author="George Orwell"),
    ]


@pytest.fixture
def catalog_records() -> list[SearchableRecord]:
    """A small storefront catalog with descriptions, categories and extras."""
    return [
        SearchableRecord(
            id="gatsby",
            title="The Great Gatsby",
            author="F. Scott Fitzgerald",
            description="A classic American novel about the Jazz Age.",
            category="Classic Literature",
            extra={"price": 12.99, "condition": "old"},
        ),
        SearchableRecord(
            id="atomic",
            title="Atomic Habits",
            author="James Clear",
            description="An easy and proven way to build good habits.",
            category="Self-Help",
            extra={"price": 16.99, "condition": "new"},
        ),
        SearchableRecord(
            id="orwell",
            title="1984",
            author="George Orwell",
            description="A dystopian social science fiction novel.",
            category="Fiction",
            extra={"price": 9.99, "condition": "old"},
        ),
        SearchableRecord(
            id="kobita",
            title="Sanchita",
            author="Kazi Nazrul Islam",
            description=None,
            category="Kobita",
            extra={"condition": "new"},
        ),
    ]


@pytest.fixture
def restore_root_logging():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
