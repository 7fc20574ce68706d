"""Menu repository: menu categories and the categories a business actually serves."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bizdirectory.application.dtos.catalog import MenuCategoryResult
from bizdirectory.infrastructure.persistence.models import Dish, MenuCategory
from bizdirectory.infrastructure.persistence.repositories.base import BaseRepository


class MenuRepository(BaseRepository[MenuCategory]):
    """Menu category lookups (read-only)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, MenuCategory)

    async def categories_used_by_business(
        self, business_id: int
    ) -> list[MenuCategoryResult]:
        """Distinct categories with at least one dish of the business, sorted by name."""
        used = (
            select(Dish.id)
            .where(Dish.business_id == business_id, Dish.category_id == MenuCategory.id)
            .correlate(MenuCategory)
            .exists()
        )
        result = await self.db.execute(
            select(MenuCategory.id.label("id"), MenuCategory.name.label("name"))
            .where(used)
            .order_by(MenuCategory.name.asc())
        )
        return [MenuCategoryResult(id=row.id, name=row.name) for row in result.all()]

    async def list_categories(self) -> list[MenuCategoryResult]:
        result = await self.db.execute(
            select(MenuCategory.id.label("id"), MenuCategory.name.label("name"))
            .order_by(MenuCategory.name.asc())
        )
        return [MenuCategoryResult(id=row.id, name=row.name) for row in result.all()]
