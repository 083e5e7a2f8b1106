"""Centralized configuration for catalog-search using Pydantic Settings."""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_search.domain.search import DEFAULT_THRESHOLD, SEARCH_FIELDS, SearchOptions
from catalog_search.search.matcher import DEFAULT_MAX_INPUT_CHARS
from catalog_search.search.suggestions import DEFAULT_MAX_SUGGESTIONS


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    All environment variables are validated at startup with proper types.
    Per-call ``SearchOptions`` default to the values configured here.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    catalog_name: str = Field(default="Catalog", description="Catalog name reported in logs and traces")

    # Ranking
    search_threshold: float = Field(
        default=DEFAULT_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Minimum averaged word-match score for a field to count as matched",
    )
    search_fields: str = Field(
        default=",".join(SEARCH_FIELDS),
        description="Comma-separated record fields probed by search (title, author, description, category)",
    )
    include_transliteration: bool = Field(default=True, description="Run script-conversion expansion")
    include_phonetic: bool = Field(default=True, description="Run phonetic expansion for Latin-script queries")
    max_input_chars: int = Field(
        default=DEFAULT_MAX_INPUT_CHARS,
        ge=64,
        description="Maximum characters of field/query text fed to fuzzy word matching",
    )

    # Suggestions and highlighting
    max_suggestions: int = Field(default=DEFAULT_MAX_SUGGESTIONS, ge=1, description="Default suggestion count")
    highlight_style: Literal["html", "plain"] = Field(
        default="html", description="Highlight marker: html (<mark>) or plain ([[ ]])"
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    @model_validator(mode="after")
    def _check_search_fields(self) -> "Settings":
        fields = self.get_search_fields()
        if not fields:
            raise ValueError("SEARCH_FIELDS must name at least one field")
        unknown = [name for name in fields if name not in SEARCH_FIELDS]
        if unknown:
            raise ValueError(f"Unknown search fields {unknown}. Available: {list(SEARCH_FIELDS)}")
        return self

    def get_search_fields(self) -> list[str]:
        """Get the configured search fields (comma-separated)."""
        if not self.search_fields:
            return []
        return [name.strip().lower() for name in self.search_fields.split(",") if name.strip()]

    def to_search_options(self) -> SearchOptions:
        """Build default per-call search options from settings."""
        return SearchOptions(
            threshold=self.search_threshold,
            search_fields=tuple(self.get_search_fields()),
            include_transliteration=self.include_transliteration,
            include_phonetic=self.include_phonetic,
        )
