"""Application DTOs (no ORM dependency)."""

from bizdirectory.application.dtos.catalog import (
    MenuCategoryResult,
    PostalCodeEntryResult,
)
from bizdirectory.application.dtos.review import RatingSummary, ReviewAggregate
from bizdirectory.application.dtos.search import (
    BusinessRow,
    BusinessSearchResult,
    Page,
)

__all__ = [
    "BusinessRow",
    "BusinessSearchResult",
    "MenuCategoryResult",
    "Page",
    "PostalCodeEntryResult",
    "RatingSummary",
    "ReviewAggregate",
]
