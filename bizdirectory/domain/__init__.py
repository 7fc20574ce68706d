"""Domain layer: value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from bizdirectory.domain.enums import SortDirection, SortField
from bizdirectory.domain.exceptions import (
    DirectoryException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
)
from bizdirectory.domain.value_objects import PageRequest, SearchCriteria, SortSpec

__all__ = [
    # Enums
    "SortDirection",
    "SortField",
    # Exceptions
    "DirectoryException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    # Value objects
    "PageRequest",
    "SearchCriteria",
    "SortSpec",
]
