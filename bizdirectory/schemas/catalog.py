"""Reference catalog schemas (postal codes and alcaldías)."""

from pydantic import BaseModel


class PostalCodeEntryResponse(BaseModel):
    """Postal-code catalog entry."""

    postal_code: str
    colonia: str
    alcaldia: str


class AreaListResponse(BaseModel):
    """Distinct alcaldías usable as the search area filter."""

    areas: list[str]
