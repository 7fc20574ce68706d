"""DTOs for reference catalogs: postal codes and menu categories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PostalCodeEntryResult:
    """Postal-code catalog entry: (postal_code, colonia) -> alcaldía."""

    postal_code: str
    colonia: str
    alcaldia: str


@dataclass(frozen=True)
class MenuCategoryResult:
    """Menu category (id and display name)."""

    id: int
    name: str
