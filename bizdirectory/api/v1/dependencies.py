"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and use cases.
Routes depend only on these dependencies, not on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bizdirectory.application.use_cases import (
    BusinessProfileService,
    BusinessSearchService,
    CatalogService,
)
from bizdirectory.core.config import get_settings
from bizdirectory.infrastructure.persistence.database import get_db
from bizdirectory.infrastructure.persistence.repositories import (
    BusinessSearchRepository,
    MenuRepository,
    PostalCodeCatalogRepository,
    ReviewAggregateRepository,
    UserAddressRepository,
)


async def get_search_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> BusinessSearchRepository:
    """Business search repository (read-only)."""
    return BusinessSearchRepository(db)


async def get_address_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserAddressRepository:
    return UserAddressRepository(db)


async def get_postal_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PostalCodeCatalogRepository:
    return PostalCodeCatalogRepository(db)


async def get_menu_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MenuRepository:
    return MenuRepository(db)


async def get_review_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ReviewAggregateRepository:
    return ReviewAggregateRepository(db)


async def get_search_service(
    search_repo: Annotated[BusinessSearchRepository, Depends(get_search_repo)],
    address_repo: Annotated[UserAddressRepository, Depends(get_address_repo)],
) -> BusinessSearchService:
    """Search use case with paging bounds from settings."""
    settings = get_settings()
    return BusinessSearchService(
        search_repo,
        address_repo,
        default_page_size=settings.search_default_page_size,
        max_page_size=settings.search_max_page_size,
    )


async def get_business_profile_service(
    search_repo: Annotated[BusinessSearchRepository, Depends(get_search_repo)],
    menu_repo: Annotated[MenuRepository, Depends(get_menu_repo)],
    review_repo: Annotated[ReviewAggregateRepository, Depends(get_review_repo)],
) -> BusinessProfileService:
    return BusinessProfileService(search_repo, menu_repo, review_repo)


async def get_catalog_service(
    postal_repo: Annotated[PostalCodeCatalogRepository, Depends(get_postal_repo)],
    menu_repo: Annotated[MenuRepository, Depends(get_menu_repo)],
) -> CatalogService:
    return CatalogService(postal_repo, menu_repo)
