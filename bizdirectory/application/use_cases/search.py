"""Business search use case. Delegates to IBusinessSearchRepository.

Two operations: general search (text, area, categories) and the ranked
listing of businesses in the caller's own area. Both are stateless and
request-scoped; each call builds its own criteria and runs one read.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from bizdirectory.application.dtos.search import BusinessRow, BusinessSearchResult, Page
from bizdirectory.core.constants import (
    DEFAULT_PAGE_SIZE,
    FALLBACK_NAME_TEMPLATE,
    MAX_PAGE_SIZE,
)
from bizdirectory.domain.value_objects.search import PageRequest, SearchCriteria
from bizdirectory.shared.telemetry.logging import get_logger
from bizdirectory.shared.utils.rating import round_rating

if TYPE_CHECKING:
    from bizdirectory.application.interfaces.repositories import (
        IBusinessSearchRepository,
        IUserAddressRepository,
    )

logger = get_logger(__name__)


def to_search_result(row: BusinessRow) -> BusinessSearchResult:
    """Map a raw search row to the public result shape.

    Missing name -> "Business #<id>"; missing aggregate -> 0 reviews, 0.0 rating.
    """
    name = row.name if row.name and row.name.strip() else None
    return BusinessSearchResult(
        id=row.business_id,
        name=name or FALLBACK_NAME_TEMPLATE.format(business_id=row.business_id),
        avatar_url=row.avatar_url or None,
        review_count=int(row.review_count or 0),
        average_rating=round_rating(row.average_rating),
    )


class BusinessSearchService:
    """Business search across the directory (active businesses only)."""

    def __init__(
        self,
        search_repo: "IBusinessSearchRepository",
        address_repo: "IUserAddressRepository",
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        self.search_repo = search_repo
        self.address_repo = address_repo
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def search(
        self,
        text: str | None = None,
        area: str | None = None,
        categories: Iterable[str | None] | None = None,
        page: int | None = 0,
        size: int | None = None,
        sort: str | None = None,
    ) -> Page[BusinessSearchResult]:
        """Search by optional name fragment, alcaldía and category labels (ANY match).

        Absent or blank criteria do not filter. Default sort is name ascending.
        """
        criteria = SearchCriteria.build(
            text=text,
            area=area,
            categories=categories,
            page=page,
            size=size,
            sort=sort,
            default_size=self.default_page_size,
            max_size=self.max_page_size,
        )
        logger.debug("Business search criteria: %s", criteria)
        rows, total = await self.search_repo.search_page(criteria)
        return Page(
            items=[to_search_result(r) for r in rows],
            page=criteria.page.page,
            size=criteria.page.size,
            total=total,
        )

    async def top_in_area(
        self,
        user_id: int,
        page: int | None = 0,
        size: int | None = None,
    ) -> Page[BusinessSearchResult]:
        """Rank active businesses in the user's own alcaldía by rating.

        Returns an empty page (size 0) when the user's area cannot be resolved;
        there is no fallback to a global listing.
        """
        area = await self.address_repo.get_area_for_user(user_id)
        if area is None:
            logger.info("No area on file for user %s; ranked listing is empty", user_id)
            return Page.empty()
        page_request = PageRequest.of(
            page, size, default_size=self.default_page_size, max_size=self.max_page_size
        )
        rows, total = await self.search_repo.top_in_area(area, page_request)
        return Page(
            items=[to_search_result(r) for r in rows],
            page=page_request.page,
            size=page_request.size,
            total=total,
        )
