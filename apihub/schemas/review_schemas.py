"""Review request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from apihub.application.dtos.catalog_dtos import (
    ReviewAuthorResult,
    ReviewPageResult,
    ReviewResult,
)
from apihub.domain.entities.review import MAX_RATING, MIN_RATING
from apihub.domain.enums import VoteDirection
from apihub.schemas.common_schemas import CursorPageMeta


# =============================================================================
# Request Schemas
# =============================================================================


class ReviewCreateRequest(BaseModel):
    """Request to review a listing.

    Attributes:
        api_id: Reviewed listing.
        user_id: Author.
        rating: 1-5 stars.
        content: Optional review text.
    """

    api_id: UUID = Field(..., description="Reviewed listing")
    user_id: UUID = Field(..., description="Review author")
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Stars")
    content: str | None = Field(None, description="Review text")


class ReviewVoteRequest(BaseModel):
    """Helpful / not helpful vote."""

    direction: VoteDirection = Field(
        VoteDirection.UP, description="up adds one, down removes one"
    )


# =============================================================================
# Response Schemas
# =============================================================================


class ReviewAuthorResponse(BaseModel):
    """Public author details."""

    id: UUID
    name: str | None = None
    avatar_url: str | None = None

    @classmethod
    def from_dto(cls, dto: ReviewAuthorResult) -> "ReviewAuthorResponse":
        """Convert application DTO to response schema."""
        return cls(id=dto.id, name=dto.name, avatar_url=dto.avatar_url)


class ReviewResponse(BaseModel):
    """Single review.

    Attributes:
        id: Review identifier.
        api_id: Reviewed listing.
        user_id: Author id.
        rating: Stars.
        content: Review text.
        helpful_count: Net helpful votes.
        created_at: Creation timestamp.
        author: Author details, when the author still exists.
    """

    id: UUID = Field(..., description="Review identifier")
    api_id: UUID = Field(..., description="Reviewed listing")
    user_id: UUID = Field(..., description="Author")
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING)
    content: str | None = None
    helpful_count: int = Field(..., description="Net helpful votes")
    created_at: datetime
    author: ReviewAuthorResponse | None = None

    @classmethod
    def from_dto(cls, dto: ReviewResult) -> "ReviewResponse":
        """Convert application DTO to response schema.

        Args:
            dto: ReviewResult from handler.

        Returns:
            ReviewResponse for API response.
        """
        return cls(
            id=dto.id,
            api_id=dto.api_id,
            user_id=dto.user_id,
            rating=dto.rating,
            content=dto.content,
            helpful_count=dto.helpful_count,
            created_at=dto.created_at,
            author=(
                ReviewAuthorResponse.from_dto(dto.author)
                if dto.author is not None
                else None
            ),
        )


class ReviewListResponse(CursorPageMeta):
    """Cursor page of reviews."""

    items: list[ReviewResponse]

    @classmethod
    def from_dto(cls, dto: ReviewPageResult) -> "ReviewListResponse":
        """Convert application DTO to response schema."""
        return cls(
            items=[ReviewResponse.from_dto(item) for item in dto.items],
            next_cursor=dto.next_cursor,
        )
