"""Review aggregate repository: count and average rating per business (read-only)."""

from __future__ import annotations

from sqlalchemy import Subquery, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from bizdirectory.application.dtos.review import RatingSummary, ReviewAggregate
from bizdirectory.core.constants import MAX_RATING, MIN_RATING
from bizdirectory.infrastructure.persistence.models import Post
from bizdirectory.shared.utils.rating import round_rating


def review_aggregate_subquery() -> Subquery:
    """Per-business review_count and average_rating, keyed by business_id.

    Outer-join it on business_id; businesses without reviews get NULLs.
    """
    return (
        select(
            Post.reviewed_business_id.label("business_id"),
            func.count(Post.id).label("review_count"),
            func.avg(Post.rating).label("average_rating"),
        )
        .group_by(Post.reviewed_business_id)
        .subquery("review_agg")
    )


class ReviewAggregateRepository:
    """Review aggregates for businesses. Missing aggregates are zero, never None."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_aggregate(self, business_id: int) -> ReviewAggregate:
        result = await self.db.execute(
            select(func.count(Post.id), func.avg(Post.rating)).where(
                Post.reviewed_business_id == business_id
            )
        )
        count, avg = result.one()
        return ReviewAggregate(
            business_id=business_id,
            review_count=count or 0,
            average_rating=round_rating(avg),
        )

    async def get_rating_summary(self, business_id: int) -> RatingSummary:
        """Aggregate plus distribution by star value (every star 1..5 present)."""
        aggregate = await self.get_aggregate(business_id)
        result = await self.db.execute(
            select(Post.rating, func.count(Post.id))
            .where(Post.reviewed_business_id == business_id)
            .group_by(Post.rating)
        )
        distribution = {star: 0 for star in range(MIN_RATING, MAX_RATING + 1)}
        for rating, count in result.all():
            distribution[int(rating)] = count
        return RatingSummary(
            business_id=business_id,
            review_count=aggregate.review_count,
            average_rating=aggregate.average_rating,
            distribution=distribution,
        )
