"""Reference catalog lookups: alcaldías, postal codes, menu categories.

Lets clients offer valid values for the search filters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bizdirectory.application.dtos.catalog import MenuCategoryResult, PostalCodeEntryResult
from bizdirectory.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from bizdirectory.application.interfaces.repositories import (
        IMenuRepository,
        IPostalCodeCatalogRepository,
    )


class CatalogService:
    def __init__(
        self,
        postal_repo: "IPostalCodeCatalogRepository",
        menu_repo: "IMenuRepository",
    ) -> None:
        self.postal_repo = postal_repo
        self.menu_repo = menu_repo

    async def list_areas(self) -> list[str]:
        return await self.postal_repo.list_areas()

    async def colonias_for_postal_code(self, postal_code: str) -> list[PostalCodeEntryResult]:
        """Catalog entries for postal_code; ResourceNotFoundException if there are none."""
        code = postal_code.strip()
        entries = await self.postal_repo.list_by_postal_code(code)
        if not entries:
            raise ResourceNotFoundException("postal_code", code)
        return entries

    async def get_entry(self, postal_code: str, colonia: str) -> PostalCodeEntryResult:
        """Single catalog entry; ResourceNotFoundException when the pair is unknown."""
        code, name = postal_code.strip(), colonia.strip()
        entry = await self.postal_repo.get(code, name)
        if entry is None:
            raise ResourceNotFoundException("postal_code", f"{code}/{name}")
        return entry

    async def list_menu_categories(self) -> list[MenuCategoryResult]:
        return await self.menu_repo.list_categories()
