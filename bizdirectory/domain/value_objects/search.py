"""Search criteria value objects.

Raw caller input is normalized here before any query is built. Search is
forgiving: malformed optional input degrades to "criterion absent" and
never raises.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from bizdirectory.core.constants import (
    DEFAULT_PAGE_SIZE,
    MAX_CRITERION_LENGTH,
    MAX_PAGE_SIZE,
)
from bizdirectory.domain.enums import SortDirection, SortField


def _clean_text(value: str | None) -> str | None:
    """Trim and cap at MAX_CRITERION_LENGTH; blank or None becomes None."""
    if value is None:
        return None
    stripped = value.strip()[:MAX_CRITERION_LENGTH].rstrip()
    return stripped or None


@dataclass(frozen=True)
class SortSpec:
    """Resolved sort key and direction."""

    field: SortField
    direction: SortDirection

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    @classmethod
    def parse(cls, raw: str | None, default: "SortSpec") -> "SortSpec":
        """Parse 'field,direction'. Unknown field or blank input returns default.

        Direction is case-insensitive; anything other than 'desc' is ascending.
        """
        cleaned = _clean_text(raw)
        if cleaned is None:
            return default
        parts = cleaned.split(",")
        field = SortField.from_str(parts[0])
        if field is None:
            return default
        direction = SortDirection.from_str(parts[1] if len(parts) > 1 else None)
        return cls(field, direction)

    def __str__(self) -> str:
        return f"{self.field.value},{self.direction.value}"


# General search lists by name; the area listing ranks by rating.
DEFAULT_SEARCH_SORT_SPEC = SortSpec(SortField.NAME, SortDirection.ASC)
DEFAULT_RANKED_SORT_SPEC = SortSpec(SortField.RATING, SortDirection.DESC)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and clamped page size."""

    page: int
    size: int

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(
        cls,
        page: int | None,
        size: int | None,
        *,
        default_size: int = DEFAULT_PAGE_SIZE,
        max_size: int = MAX_PAGE_SIZE,
    ) -> "PageRequest":
        """Clamp page to >= 0 and size to [1, max_size]; None size uses default_size."""
        p = 0 if page is None else max(page, 0)
        s = default_size if size is None else size
        s = max(min(s, max_size), 1)
        return cls(page=p, size=s)


@dataclass(frozen=True)
class SearchCriteria:
    """Normalized business search request.

    text and area are None when absent; categories is None when no label
    survived normalization (no category filter, not "match none").
    """

    text: str | None
    area: str | None
    categories: tuple[str, ...] | None
    page: PageRequest
    sort: SortSpec

    @staticmethod
    def normalize_categories(labels: Iterable[str | None] | None) -> tuple[str, ...] | None:
        """Trim and lower-case labels, drop blanks and duplicates (order kept)."""
        if not labels:
            return None
        seen: dict[str, None] = {}
        for label in labels:
            cleaned = _clean_text(label)
            if cleaned is not None:
                seen.setdefault(cleaned.lower(), None)
        return tuple(seen) or None

    @classmethod
    def build(
        cls,
        text: str | None = None,
        area: str | None = None,
        categories: Iterable[str | None] | None = None,
        page: int | None = None,
        size: int | None = None,
        sort: str | None = None,
        *,
        default_sort: SortSpec = DEFAULT_SEARCH_SORT_SPEC,
        default_size: int = DEFAULT_PAGE_SIZE,
        max_size: int = MAX_PAGE_SIZE,
    ) -> "SearchCriteria":
        return cls(
            text=_clean_text(text),
            area=_clean_text(area),
            categories=cls.normalize_categories(categories),
            page=PageRequest.of(page, size, default_size=default_size, max_size=max_size),
            sort=SortSpec.parse(sort, default_sort),
        )
