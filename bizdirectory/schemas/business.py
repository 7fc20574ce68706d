"""Business profile schemas: menu tags and rating summary."""

from pydantic import BaseModel, Field


class MenuCategoryResponse(BaseModel):
    """Menu category (used as a menu tag on a business profile)."""

    category_id: int
    category_name: str


class RatingSummaryResponse(BaseModel):
    """Rating summary for one business."""

    business_id: int
    average_rating: float
    reviews_count: int
    distribution: dict[int, int] = Field(
        default_factory=dict, description="Review count per star value (1..5)"
    )
