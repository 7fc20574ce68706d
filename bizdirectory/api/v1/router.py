"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from bizdirectory.api.v1.dependencies.
"""

from fastapi import APIRouter

from bizdirectory.api.v1.endpoints import businesses, catalog, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(businesses.router, prefix="/businesses", tags=["businesses"])
api_router.include_router(
    catalog.postal_codes_router, prefix="/postal-codes", tags=["catalog"]
)
api_router.include_router(
    catalog.menu_categories_router, prefix="/menu-categories", tags=["catalog"]
)
