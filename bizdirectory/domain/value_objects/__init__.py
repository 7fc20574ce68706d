"""Domain value objects and shared value types."""

from bizdirectory.domain.value_objects.search import (
    PageRequest,
    SearchCriteria,
    SortSpec,
)

__all__ = [
    "PageRequest",
    "SearchCriteria",
    "SortSpec",
]
