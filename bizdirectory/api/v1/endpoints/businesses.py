"""Business API: search, ranked listing in the caller's area, menu tags, rating."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from bizdirectory.api.v1.dependencies import (
    get_business_profile_service,
    get_search_service,
)
from bizdirectory.application.use_cases import BusinessProfileService, BusinessSearchService
from bizdirectory.core.limiter import limit_search
from bizdirectory.schemas.business import MenuCategoryResponse, RatingSummaryResponse
from bizdirectory.schemas.search import BusinessPageResponse

router = APIRouter()


def _split_labels(categories: list[str] | None) -> list[str] | None:
    """Accept repeated ?categories=a&categories=b and comma-separated ?categories=a,b."""
    if not categories:
        return None
    return [label for raw in categories for label in raw.split(",")]


@router.get("/search", response_model=BusinessPageResponse)
@limit_search
async def search_businesses(
    request: Request,
    search_svc: Annotated[BusinessSearchService, Depends(get_search_service)],
    q: str | None = Query(None, description="Name fragment"),
    area: str | None = Query(None, description="Alcaldía"),
    categories: list[str] | None = Query(None, description="Menu categories (ANY match)"),
    page: int | None = Query(0, description="Zero-based page; negatives become 0"),
    size: int | None = Query(None, description="Page size; clamped to the allowed range"),
    sort: str | None = Query(None, description="field,direction (name|rating|reviews|id)"),
):
    """Search active businesses. Every filter is optional and combined with AND."""
    result = await search_svc.search(
        text=q,
        area=area,
        categories=_split_labels(categories),
        page=page,
        size=size,
        sort=sort,
    )
    return BusinessPageResponse.from_page(result)


@router.get("/top", response_model=BusinessPageResponse)
@limit_search
async def top_businesses_in_user_area(
    request: Request,
    search_svc: Annotated[BusinessSearchService, Depends(get_search_service)],
    user_id: int = Query(..., description="User whose alcaldía is ranked"),
    page: int | None = Query(0),
    size: int | None = Query(None),
):
    """Best-rated active businesses in the user's alcaldía (empty if unknown)."""
    result = await search_svc.top_in_area(user_id=user_id, page=page, size=size)
    return BusinessPageResponse.from_page(result)


@router.get(
    "/{business_id}/menu/categories", response_model=list[MenuCategoryResponse]
)
async def business_menu_categories(
    business_id: int,
    profile_svc: Annotated[BusinessProfileService, Depends(get_business_profile_service)],
):
    """Categories with at least one dish on the business menu, sorted by name."""
    categories = await profile_svc.menu_categories(business_id)
    return [
        MenuCategoryResponse(category_id=c.id, category_name=c.name)
        for c in categories
    ]


@router.get("/{business_id}/rating", response_model=RatingSummaryResponse)
async def business_rating(
    business_id: int,
    profile_svc: Annotated[BusinessProfileService, Depends(get_business_profile_service)],
):
    """Average rating, review count and star distribution."""
    summary = await profile_svc.rating(business_id)
    return RatingSummaryResponse(
        business_id=summary.business_id,
        average_rating=summary.average_rating,
        reviews_count=summary.review_count,
        distribution=summary.distribution,
    )
