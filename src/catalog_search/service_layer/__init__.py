"""Service layer: application-facing orchestration of the search engine."""

from catalog_search.service_layer.search_service import CatalogSearchService


__all__ = ["CatalogSearchService"]
