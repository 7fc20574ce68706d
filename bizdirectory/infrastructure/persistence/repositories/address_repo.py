"""Address repositories: user address and postal-code catalog (read-only)."""

from __future__ import annotations

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from bizdirectory.application.dtos.catalog import PostalCodeEntryResult
from bizdirectory.infrastructure.persistence.models import PostalCodeCatalog, UserAddress
from bizdirectory.infrastructure.persistence.repositories.base import BaseRepository


def _entry_to_result(entry: PostalCodeCatalog) -> PostalCodeEntryResult:
    """Map ORM PostalCodeCatalog to application PostalCodeEntryResult."""
    return PostalCodeEntryResult(
        postal_code=entry.postal_code,
        colonia=entry.colonia,
        alcaldia=entry.alcaldia,
    )


class UserAddressRepository(BaseRepository[UserAddress]):
    """User address lookups. Primary key is the owning user id."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, UserAddress)

    async def get_area_for_user(self, user_id: int) -> str | None:
        """Alcaldía of the user's address via the catalog; None when missing or blank."""
        result = await self.db.execute(
            select(PostalCodeCatalog.alcaldia)
            .select_from(UserAddress)
            .join(
                PostalCodeCatalog,
                and_(
                    PostalCodeCatalog.postal_code == UserAddress.postal_code,
                    PostalCodeCatalog.colonia == UserAddress.colonia,
                ),
            )
            .where(UserAddress.user_id == user_id)
        )
        area = result.scalar_one_or_none()
        if area is None or not area.strip():
            return None
        return area.strip()


class PostalCodeCatalogRepository(BaseRepository[PostalCodeCatalog]):
    """Postal-code catalog lookups by composite key, postal code, or alcaldía."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, PostalCodeCatalog)

    async def get(self, postal_code: str, colonia: str) -> PostalCodeEntryResult | None:
        entry = await self.get_by_id((postal_code, colonia))
        return _entry_to_result(entry) if entry else None

    async def list_by_postal_code(self, postal_code: str) -> list[PostalCodeEntryResult]:
        result = await self.db.execute(
            select(PostalCodeCatalog)
            .where(PostalCodeCatalog.postal_code == postal_code)
            .order_by(PostalCodeCatalog.colonia.asc())
        )
        return [_entry_to_result(e) for e in result.scalars().all()]

    async def list_areas(self) -> list[str]:
        """Distinct alcaldías, sorted."""
        result = await self.db.execute(
            select(PostalCodeCatalog.alcaldia)
            .distinct()
            .order_by(PostalCodeCatalog.alcaldia.asc())
        )
        return list(result.scalars().all())
