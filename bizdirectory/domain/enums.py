"""Domain enumerations for the directory application.

Enums represent fixed sets of domain values (e.g. allowed sort keys).
"""

from enum import Enum


class SortField(str, Enum):
    """Sort keys accepted by business search.

    Each member maps to a fixed column expression in the persistence layer;
    caller input is only ever matched against these values.
    """

    NAME = "name"
    RATING = "rating"
    REVIEWS = "reviews"
    ID = "id"

    @classmethod
    def from_str(cls, raw: str | None) -> "SortField | None":
        """Return the member for raw (case-insensitive, trimmed), or None if unknown."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


class SortDirection(str, Enum):
    """Sort direction. Only 'desc' (any case) is descending."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_str(cls, raw: str | None) -> "SortDirection":
        if raw is not None and raw.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC
