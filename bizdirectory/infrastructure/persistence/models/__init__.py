"""Persistence models: ORM entities and mixins."""

from bizdirectory.infrastructure.persistence.models.address import (
    PostalCodeCatalog,
    UserAddress,
)
from bizdirectory.infrastructure.persistence.models.business import Business
from bizdirectory.infrastructure.persistence.models.menu import Dish, MenuCategory
from bizdirectory.infrastructure.persistence.models.mixins import (
    CreatedAtMixin,
    IntegerIdMixin,
)
from bizdirectory.infrastructure.persistence.models.post import Post
from bizdirectory.infrastructure.persistence.models.user import User

__all__ = [
    "Business",
    "Dish",
    "MenuCategory",
    "Post",
    "PostalCodeCatalog",
    "User",
    "UserAddress",
    "CreatedAtMixin",
    "IntegerIdMixin",
]
