"""Business search repository: applies composed predicates with ordering and paging.

Read-only. Database errors (SQLAlchemyError) propagate to the caller; there is
no retry and nothing to roll back.
"""

from __future__ import annotations

from sqlalchemy import ColumnElement, Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bizdirectory.application.dtos.search import BusinessRow
from bizdirectory.domain.enums import SortField
from bizdirectory.domain.value_objects.search import (
    DEFAULT_RANKED_SORT_SPEC,
    PageRequest,
    SearchCriteria,
    SortSpec,
)
from bizdirectory.infrastructure.persistence.models import Business, User
from bizdirectory.infrastructure.persistence.repositories.review_repo import (
    review_aggregate_subquery,
)
from bizdirectory.infrastructure.persistence.repositories.search_predicates import (
    compose_business_filter,
    in_area,
    is_active,
)
from bizdirectory.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


class BusinessSearchRepository:
    """Paginated search over active businesses (general search and area ranking)."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db
        self._agg = review_aggregate_subquery()

    @property
    def _review_count(self) -> ColumnElement[int]:
        return func.coalesce(self._agg.c.review_count, 0)

    @property
    def _average_rating(self) -> ColumnElement[float]:
        return func.coalesce(self._agg.c.average_rating, 0)

    def _sort_column(self, field: SortField) -> ColumnElement:
        """Fixed column for each allowed sort key."""
        columns: dict[SortField, ColumnElement] = {
            SortField.NAME: User.name,
            SortField.RATING: self._average_rating,
            SortField.REVIEWS: self._review_count,
            SortField.ID: Business.id,
        }
        return columns[field]

    def _order_by(self, sort: SortSpec) -> list[ColumnElement]:
        """Resolved sort plus business id ascending as a stable tie-breaker.

        Rating ties are broken by review count in the same direction first.
        """
        columns = [self._sort_column(sort.field)]
        if sort.field is SortField.RATING:
            columns.append(self._review_count)
        order = [c.desc() if sort.descending else c.asc() for c in columns]
        if sort.field is not SortField.ID:
            order.append(Business.id.asc())
        return order

    def _rows_statement(self, predicate: ColumnElement[bool]) -> Select:
        return (
            select(
                Business.id.label("business_id"),
                User.name.label("name"),
                User.avatar_url.label("avatar_url"),
                self._agg.c.review_count,
                self._agg.c.average_rating,
            )
            .select_from(Business)
            .join(User, User.id == Business.id)
            .outerjoin(self._agg, self._agg.c.business_id == Business.id)
            .where(predicate)
        )

    @staticmethod
    def _count_statement(predicate: ColumnElement[bool]) -> Select:
        return (
            select(func.count())
            .select_from(Business)
            .join(User, User.id == Business.id)
            .where(predicate)
        )

    async def _execute_page(
        self,
        predicate: ColumnElement[bool],
        order_by: list[ColumnElement],
        page: PageRequest,
    ) -> tuple[list[BusinessRow], int]:
        """Count all matches, then fetch [offset, offset + size) in order."""
        total = (await self.db.execute(self._count_statement(predicate))).scalar() or 0
        if total == 0 or page.offset >= total:
            return [], total
        result = await self.db.execute(
            self._rows_statement(predicate)
            .order_by(*order_by)
            .offset(page.offset)
            .limit(page.size)
        )
        rows = [
            BusinessRow(
                business_id=row.business_id,
                name=row.name,
                avatar_url=row.avatar_url,
                review_count=row.review_count,
                average_rating=row.average_rating,
            )
            for row in result.all()
        ]
        return rows, total

    async def search_page(
        self, criteria: SearchCriteria
    ) -> tuple[list[BusinessRow], int]:
        """Return (rows for the requested page, total matching count)."""
        predicate = compose_business_filter(criteria)
        rows, total = await self._execute_page(
            predicate, self._order_by(criteria.sort), criteria.page
        )
        logger.debug(
            "Business search matched %d (page=%d size=%d sort=%s)",
            total,
            criteria.page.page,
            criteria.page.size,
            criteria.sort,
        )
        return rows, total

    async def top_in_area(
        self, area: str, page: PageRequest
    ) -> tuple[list[BusinessRow], int]:
        """Active businesses in area by average rating desc, then review count desc."""
        predicate = and_(is_active(), in_area(area))
        return await self._execute_page(
            predicate, self._order_by(DEFAULT_RANKED_SORT_SPEC), page
        )

    async def business_exists(self, business_id: int) -> bool:
        result = await self.db.execute(
            select(Business.id).where(Business.id == business_id)
        )
        return result.scalar_one_or_none() is not None
