"""Use cases: business search, business profile lookups, reference catalogs."""

from bizdirectory.application.use_cases.business_profile import BusinessProfileService
from bizdirectory.application.use_cases.catalog import CatalogService
from bizdirectory.application.use_cases.search import BusinessSearchService, to_search_result

__all__ = [
    "BusinessProfileService",
    "BusinessSearchService",
    "CatalogService",
    "to_search_result",
]
