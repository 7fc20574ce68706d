"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain value objects only; no
infrastructure imports. Every repository here is read-only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from bizdirectory.application.dtos.catalog import (
        MenuCategoryResult,
        PostalCodeEntryResult,
    )
    from bizdirectory.application.dtos.review import RatingSummary, ReviewAggregate
    from bizdirectory.application.dtos.search import BusinessRow
    from bizdirectory.domain.value_objects.search import PageRequest, SearchCriteria


class IBusinessSearchRepository(Protocol):
    """Protocol for the paginated business search executor (DIP)."""

    async def search_page(
        self, criteria: SearchCriteria
    ) -> tuple[list[BusinessRow], int]:
        """Return (rows for the requested page, total matching count)."""

    async def top_in_area(
        self, area: str, page: PageRequest
    ) -> tuple[list[BusinessRow], int]:
        """Return active businesses in area ranked by rating (page rows, total)."""

    async def business_exists(self, business_id: int) -> bool:
        """Return True if a business with this id exists (active or not)."""


class IUserAddressRepository(Protocol):
    """Protocol for user address lookups (DIP)."""

    async def get_area_for_user(self, user_id: int) -> str | None:
        """Return the alcaldía of the user's address, or None if unresolvable."""


class IPostalCodeCatalogRepository(Protocol):
    """Protocol for postal-code catalog lookups (DIP)."""

    async def get(self, postal_code: str, colonia: str) -> PostalCodeEntryResult | None:
        """Return the entry for (postal_code, colonia), or None."""

    async def list_by_postal_code(self, postal_code: str) -> list[PostalCodeEntryResult]:
        """Return all colonias for a postal code (sorted by colonia)."""

    async def list_areas(self) -> list[str]:
        """Return distinct alcaldías (sorted)."""


class IReviewAggregateRepository(Protocol):
    """Protocol for review aggregates (DIP)."""

    async def get_aggregate(self, business_id: int) -> ReviewAggregate:
        """Return count and average for business; zeros when it has no reviews."""

    async def get_rating_summary(self, business_id: int) -> RatingSummary:
        """Return aggregate plus 1..5 star distribution."""


class IMenuRepository(Protocol):
    """Protocol for menu category lookups (DIP)."""

    async def categories_used_by_business(
        self, business_id: int
    ) -> list[MenuCategoryResult]:
        """Return distinct categories of the business's dishes, sorted by name."""

    async def list_categories(self) -> list[MenuCategoryResult]:
        """Return all menu categories sorted by name."""
