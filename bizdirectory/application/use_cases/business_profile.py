"""Business profile lookups: menu tags and rating summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bizdirectory.application.dtos.catalog import MenuCategoryResult
from bizdirectory.application.dtos.review import RatingSummary
from bizdirectory.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from bizdirectory.application.interfaces.repositories import (
        IBusinessSearchRepository,
        IMenuRepository,
        IReviewAggregateRepository,
    )


class BusinessProfileService:
    """Read-only profile data for a single business."""

    def __init__(
        self,
        search_repo: "IBusinessSearchRepository",
        menu_repo: "IMenuRepository",
        review_repo: "IReviewAggregateRepository",
    ) -> None:
        self.search_repo = search_repo
        self.menu_repo = menu_repo
        self.review_repo = review_repo

    async def _require_business(self, business_id: int) -> None:
        if not await self.search_repo.business_exists(business_id):
            raise ResourceNotFoundException("business", business_id)

    async def menu_categories(self, business_id: int) -> list[MenuCategoryResult]:
        """Categories the business has at least one dish in (its menu tags), by name.

        Raises ResourceNotFoundException if the business does not exist.
        """
        await self._require_business(business_id)
        return await self.menu_repo.categories_used_by_business(business_id)

    async def rating(self, business_id: int) -> RatingSummary:
        """Review count, average and 1..5 distribution; zeros when there are no reviews."""
        await self._require_business(business_id)
        return await self.review_repo.get_rating_summary(business_id)
