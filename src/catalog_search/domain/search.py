"""Domain models for catalog search.

Value objects are immutable (frozen=True) so a record set handed to the
engine cannot change underneath a running search. No infrastructure
dependencies live here.
"""

from collections.abc import Mapping
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator


SearchField = Literal["title", "author", "description", "category"]
SEARCH_FIELDS: tuple[SearchField, ...] = get_args(SearchField)

# Caller-facing ranking threshold; the per-word threshold used inside field
# matching is a separate constant, see catalog_search.search.matcher.
DEFAULT_THRESHOLD = 0.4

SortOrder = Literal["relevance", "featured", "title", "author", "price-low", "price-high", "rating"]


class SearchableRecord(BaseModel):
    """A catalog entry the engine can probe.

    Only the named text fields take part in matching. Anything else the
    catalog carries (price, condition, isbn, ...) rides along in ``extra``.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: str
    description: str | None = None
    category: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SearchableRecord":
        """Build a record from a flat mapping, moving unknown keys into ``extra``."""
        known = {"id", "title", "author", "description", "category"}
        payload = {key: value for key, value in data.items() if key in known}
        extra = dict(data.get("extra") or {})
        extra.update({key: value for key, value in data.items() if key not in known and key != "extra"})
        return cls(**payload, extra=extra)

    def field_text(self, name: str) -> str | None:
        """Return the text held by a searchable field, or None when it is empty/unset."""
        if name not in SEARCH_FIELDS:
            return None
        value = getattr(self, name)
        return value if isinstance(value, str) else None

    def lookup(self, key: str) -> Any:
        """Return a named field or an ``extra`` value (None when absent)."""
        if key in type(self).model_fields and key != "extra":
            return getattr(self, key)
        return self.extra.get(key)


class ScoredRecord(BaseModel):
    """A record paired with its best match score for one query."""

    model_config = ConfigDict(frozen=True)

    record: SearchableRecord
    score: float = Field(ge=0.0, le=1.0)


class SearchOptions(BaseModel):
    """Per-call search configuration.

    ``threshold`` is the minimum averaged word score for a field to count as
    matched. It does not change the fixed per-word cut-off applied inside
    field matching.
    """

    model_config = ConfigDict(frozen=True)

    threshold: float = Field(default=DEFAULT_THRESHOLD, ge=0.0, le=1.0)
    search_fields: tuple[SearchField, ...] = SEARCH_FIELDS
    include_transliteration: bool = True
    include_phonetic: bool = True


class SearchStats(BaseModel):
    """Performance and debug information for a search operation."""

    model_config = ConfigDict(frozen=True)

    total_records: int
    matched_records: int
    variant_count: int
    search_time: float


class SearchResponse(BaseModel):
    """Ranked results plus statistics."""

    model_config = ConfigDict(frozen=True)

    query: str
    results: list[ScoredRecord]
    stats: SearchStats
