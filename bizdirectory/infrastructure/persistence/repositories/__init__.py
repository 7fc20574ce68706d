"""Persistence repositories. Re-exports for dependency injection."""

from bizdirectory.infrastructure.persistence.repositories.address_repo import (
    PostalCodeCatalogRepository,
    UserAddressRepository,
)
from bizdirectory.infrastructure.persistence.repositories.base import BaseRepository
from bizdirectory.infrastructure.persistence.repositories.menu_repo import MenuRepository
from bizdirectory.infrastructure.persistence.repositories.review_repo import (
    ReviewAggregateRepository,
)
from bizdirectory.infrastructure.persistence.repositories.search_repo import (
    BusinessSearchRepository,
)

__all__ = [
    "BaseRepository",
    "BusinessSearchRepository",
    "MenuRepository",
    "PostalCodeCatalogRepository",
    "ReviewAggregateRepository",
    "UserAddressRepository",
]
