"""DTOs for business search results (no dependency on ORM)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BusinessRow:
    """Raw search row: business plus denormalized owner fields and review aggregate.

    Any of the optional fields may be missing in storage; the result mapper
    fills defaults.
    """

    business_id: int
    name: str | None
    avatar_url: str | None
    review_count: int | None
    average_rating: float | None


@dataclass(frozen=True)
class BusinessSearchResult:
    """Public search hit (read-model)."""

    id: int
    name: str
    avatar_url: str | None
    review_count: int
    average_rating: float


@dataclass(frozen=True)
class Page[T]:
    """One page of an ordered result set plus total matching count."""

    items: list[T] = field(default_factory=list)
    page: int = 0
    size: int = 0
    total: int = 0

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return (self.total + self.size - 1) // self.size

    @classmethod
    def empty(cls) -> "Page[T]":
        """Empty page: page 0, size 0, total 0."""
        return cls(items=[], page=0, size=0, total=0)
