"""Search API schemas."""

from pydantic import BaseModel, Field

from bizdirectory.application.dtos.search import BusinessSearchResult, Page


class BusinessCardResponse(BaseModel):
    """Single search hit (business card)."""

    id: int
    name: str
    avatar_url: str | None = None
    review_count: int = Field(0, description="Number of reviews")
    average_rating: float = Field(0.0, description="Average stars (0.0 when unrated)")

    @classmethod
    def from_result(cls, result: BusinessSearchResult) -> "BusinessCardResponse":
        return cls(
            id=result.id,
            name=result.name,
            avatar_url=result.avatar_url,
            review_count=result.review_count,
            average_rating=result.average_rating,
        )


class BusinessPageResponse(BaseModel):
    """One page of business cards plus pagination metadata."""

    content: list[BusinessCardResponse]
    page: int = Field(..., description="Zero-based page index")
    size: int = Field(..., description="Page size (0 for an empty ranked listing)")
    total_elements: int
    total_pages: int

    @classmethod
    def from_page(cls, page: Page[BusinessSearchResult]) -> "BusinessPageResponse":
        return cls(
            content=[BusinessCardResponse.from_result(r) for r in page.items],
            page=page.page,
            size=page.size,
            total_elements=page.total,
            total_pages=page.total_pages,
        )
