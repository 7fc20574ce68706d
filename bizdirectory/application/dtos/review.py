"""DTOs for review aggregates (count, average, star distribution)."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReviewAggregate:
    """Review count and average rating for one business. Zero when no reviews exist."""

    business_id: int
    review_count: int = 0
    average_rating: float = 0.0


@dataclass(frozen=True)
class RatingSummary:
    """Aggregate plus per-star distribution (keys 1..5, zero-filled)."""

    business_id: int
    review_count: int
    average_rating: float
    distribution: dict[int, int] = field(default_factory=dict)
