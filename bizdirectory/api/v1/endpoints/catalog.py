"""Reference catalog API: alcaldías, postal codes, menu categories."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bizdirectory.api.v1.dependencies import get_catalog_service
from bizdirectory.application.use_cases import CatalogService
from bizdirectory.schemas.business import MenuCategoryResponse
from bizdirectory.schemas.catalog import AreaListResponse, PostalCodeEntryResponse

postal_codes_router = APIRouter()
menu_categories_router = APIRouter()


@postal_codes_router.get("/areas", response_model=AreaListResponse)
async def list_areas(
    catalog_svc: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Distinct alcaldías (values accepted by the search area filter)."""
    return AreaListResponse(areas=await catalog_svc.list_areas())


@postal_codes_router.get(
    "/{postal_code}", response_model=list[PostalCodeEntryResponse]
)
async def colonias_for_postal_code(
    postal_code: str,
    catalog_svc: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Colonias and alcaldía for a postal code; 404 when the code is unknown."""
    entries = await catalog_svc.colonias_for_postal_code(postal_code)
    return [
        PostalCodeEntryResponse(
            postal_code=e.postal_code, colonia=e.colonia, alcaldia=e.alcaldia
        )
        for e in entries
    ]


@postal_codes_router.get("/{postal_code}/{colonia}", response_model=PostalCodeEntryResponse)
async def postal_code_entry(
    postal_code: str,
    colonia: str,
    catalog_svc: Annotated[CatalogService, Depends(get_catalog_service)],
):
    """Alcaldía for one (postal code, colonia) pair; 404 when the pair is unknown."""
    entry = await catalog_svc.get_entry(postal_code, colonia)
    return PostalCodeEntryResponse(
        postal_code=entry.postal_code, colonia=entry.colonia, alcaldia=entry.alcaldia
    )


@menu_categories_router.get("", response_model=list[MenuCategoryResponse])
async def list_menu_categories(
    catalog_svc: Annotated[CatalogService, Depends(get_catalog_service)],
):
    categories = await catalog_svc.list_menu_categories()
    return [
        MenuCategoryResponse(category_id=c.id, category_name=c.name)
        for c in categories
    ]
