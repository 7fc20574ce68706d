"""Application interfaces (ports) implemented by infrastructure."""

from bizdirectory.application.interfaces.repositories import (
    IBusinessSearchRepository,
    IMenuRepository,
    IPostalCodeCatalogRepository,
    IReviewAggregateRepository,
    IUserAddressRepository,
)

__all__ = [
    "IBusinessSearchRepository",
    "IMenuRepository",
    "IPostalCodeCatalogRepository",
    "IReviewAggregateRepository",
    "IUserAddressRepository",
]
