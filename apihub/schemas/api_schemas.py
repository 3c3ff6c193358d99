"""API catalog response schemas.

Includes:
- ApiResponse: one listing with its derived rating
- ApiListResponse: cursor page of listings
- ApiDetailResponse: listing plus its most recent reviews
- ApiComparisonResponse: 2-4 listings side by side
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from apihub.application.dtos.catalog_dtos import (
    ApiDetailResult,
    ApiListingResult,
    ApiPageResult,
    ApiSummaryResult,
)
from apihub.schemas.common_schemas import CursorPageMeta, GroupCountResponse
from apihub.schemas.review_schemas import ReviewResponse


# =============================================================================
# Response Schemas
# =============================================================================


class ApiResponse(BaseModel):
    """Single API listing.

    Attributes:
        id: Listing identifier.
        name: Display name.
        description: Free-text description.
        base_url: Root URL of the API.
        category: Catalog category.
        auth_type: Auth requirement label (e.g. "apiKey", "OAuth").
        rate_limit: Rate limit label.
        https: Whether the API is served over HTTPS.
        cors_policy: CORS support label.
        documentation_url: Link to upstream docs.
        featured: Whether the listing is featured.
        avg_rating: Mean rating, one decimal, 0 when unrated.
        review_count: Number of reviews.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID = Field(..., description="Listing identifier")
    name: str = Field(..., description="Display name", examples=["Open-Meteo"])
    description: str = Field(..., description="Description")
    base_url: str = Field(
        ..., description="Root URL", examples=["https://api.open-meteo.com/v1"]
    )
    category: str = Field(..., description="Category", examples=["Weather"])
    auth_type: str | None = Field(None, description="Auth requirement label")
    rate_limit: str | None = Field(None, description="Rate limit label")
    https: bool = Field(..., description="HTTPS support")
    cors_policy: str | None = Field(None, description="CORS support label")
    documentation_url: str | None = Field(None, description="Documentation link")
    featured: bool = Field(..., description="Featured flag")
    avg_rating: float = Field(..., ge=0, le=5, description="Average rating")
    review_count: int = Field(..., ge=0, description="Number of reviews")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: ApiListingResult) -> "ApiResponse":
        """Convert application DTO to response schema.

        Args:
            dto: ApiListingResult from handler.

        Returns:
            ApiResponse for API response.
        """
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            base_url=dto.base_url,
            category=dto.category,
            auth_type=dto.auth_type,
            rate_limit=dto.rate_limit,
            https=dto.https,
            cors_policy=dto.cors_policy,
            documentation_url=dto.documentation_url,
            featured=dto.featured,
            avg_rating=dto.avg_rating,
            review_count=dto.review_count,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class ApiSummaryResponse(BaseModel):
    """Minimal listing reference embedded in other resources."""

    id: UUID
    name: str
    category: str

    @classmethod
    def from_dto(cls, dto: ApiSummaryResult) -> "ApiSummaryResponse":
        """Convert application DTO to response schema."""
        return cls(id=dto.id, name=dto.name, category=dto.category)


class ApiListResponse(CursorPageMeta):
    """Cursor page of listings."""

    items: list[ApiResponse] = Field(..., description="Listings, newest first")

    @classmethod
    def from_dto(cls, dto: ApiPageResult) -> "ApiListResponse":
        """Convert application DTO to response schema."""
        return cls(
            items=[ApiResponse.from_dto(item) for item in dto.items],
            next_cursor=dto.next_cursor,
        )


class FeaturedApiListResponse(BaseModel):
    """Featured listings (not paginated)."""

    items: list[ApiResponse]

    @classmethod
    def from_dto(cls, dto: list[ApiListingResult]) -> "FeaturedApiListResponse":
        """Convert application DTOs to response schema."""
        return cls(items=[ApiResponse.from_dto(item) for item in dto])


class ApiDetailResponse(ApiResponse):
    """Listing detail with its most recent reviews."""

    reviews: list[ReviewResponse] = Field(
        default_factory=list, description="Most recent reviews, newest first"
    )

    @classmethod
    def from_detail_dto(cls, dto: ApiDetailResult) -> "ApiDetailResponse":
        """Convert application DTO to response schema.

        Args:
            dto: ApiDetailResult from handler.

        Returns:
            ApiDetailResponse for API response.
        """
        base = ApiResponse.from_dto(dto.api)
        return cls(
            **base.model_dump(),
            reviews=[ReviewResponse.from_dto(review) for review in dto.reviews],
        )


class ApiComparisonResponse(BaseModel):
    """Listings side by side, in the requested order."""

    items: list[ApiResponse] = Field(..., min_length=2, max_length=4)

    @classmethod
    def from_dto(cls, dto: list[ApiListingResult]) -> "ApiComparisonResponse":
        """Convert application DTOs to response schema."""
        return cls(items=[ApiResponse.from_dto(item) for item in dto])


class CategoryListResponse(BaseModel):
    """Categories with their listing count, largest first."""

    items: list[GroupCountResponse]
