"""Composable search predicates for the business collection.

Each fragment maps one optional criterion to a SQLAlchemy boolean clause.
An absent criterion yields true(), never a clause that matches nothing, so
the composer can AND every fragment without special cases.

Fragments reference Business (and name_matches also User); the enclosing
statement must select from business joined to users. Area and category are
reached through correlated EXISTS subqueries rather than joins: a business
may have zero, one or many matching rows there, and EXISTS needs no
de-duplication.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import ColumnElement, and_, func, or_, select, true

from bizdirectory.domain.value_objects.search import SearchCriteria
from bizdirectory.infrastructure.persistence.models import (
    Business,
    Dish,
    MenuCategory,
    PostalCodeCatalog,
    User,
    UserAddress,
)

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards (% and _) and the escape char so value matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def is_active() -> ColumnElement[bool]:
    """Business is visible to search."""
    return Business.is_active.is_(True)


def _serves_category_where(condition: ColumnElement[bool]) -> ColumnElement[bool]:
    """EXISTS a dish of this business whose category satisfies condition."""
    return (
        select(1)
        .select_from(Dish)
        .join(MenuCategory, MenuCategory.id == Dish.category_id)
        .where(Dish.business_id == Business.id, condition)
        .correlate(Business)
        .exists()
    )


def name_matches(text: str | None) -> ColumnElement[bool]:
    """Case-insensitive substring match on the owner's display name, widened to menu categories.

    The widening is deliberate: a business also matches when it serves a menu
    category whose name contains the fragment, so "tacos" finds "Taquería Don
    Pepe" and "tac" finds "El Taquito" when they serve Tacos. Matching on the
    display name alone would miss both.
    """
    if text is None:
        return true()
    pattern = f"%{escape_like(text)}%"
    return or_(
        User.name.ilike(pattern, escape=LIKE_ESCAPE),
        _serves_category_where(MenuCategory.name.ilike(pattern, escape=LIKE_ESCAPE)),
    )


def in_area(area: str | None) -> ColumnElement[bool]:
    """EXISTS an address of this business's owner whose catalog alcaldía equals area.

    Comparison is case-insensitive. Businesses without an address never match.
    """
    if area is None:
        return true()
    return (
        select(1)
        .select_from(UserAddress)
        .join(
            PostalCodeCatalog,
            and_(
                PostalCodeCatalog.postal_code == UserAddress.postal_code,
                PostalCodeCatalog.colonia == UserAddress.colonia,
            ),
        )
        .where(
            UserAddress.user_id == Business.id,
            func.lower(PostalCodeCatalog.alcaldia) == func.lower(area),
        )
        .correlate(Business)
        .exists()
    )


def serves_any_category(labels: Sequence[str] | None) -> ColumnElement[bool]:
    """EXISTS a dish of this business in any of labels (already lower-cased).

    ANY-of: one dish in one requested category is enough.
    """
    if not labels:
        return true()
    return _serves_category_where(func.lower(MenuCategory.name).in_(list(labels)))


def compose_business_filter(criteria: SearchCriteria) -> ColumnElement[bool]:
    """AND of the active filter (first, as a fast reject) and every criterion fragment."""
    fragments = [
        is_active(),
        name_matches(criteria.text),
        in_area(criteria.area),
        serves_any_category(criteria.categories),
    ]
    return and_(*fragments)
