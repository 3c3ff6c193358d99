"""Catalog and review DTOs.

DTOs:
    - ApiListingResult: Listing with derived rating
    - ApiDetailResult: Listing with rating and recent reviews
    - ApiPageResult: Cursor page of listings
    - ApiSummaryResult: Minimal listing reference (id, name, category)
    - ReviewResult / ReviewAuthorResult / ReviewPageResult
    - GroupCountResult: Category or service with its count
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from apihub.domain.entities import ApiListing, Review, User
from apihub.domain.value_objects import GroupCount, RatingSummary


@dataclass
class ApiListingResult:
    """API listing with derived rating.

    Attributes:
        id: Listing identifier.
        name: Display name.
        description: Description.
        base_url: Root URL.
        category: Catalog category.
        auth_type: Auth requirement label.
        rate_limit: Rate limit label.
        https: HTTPS support.
        cors_policy: CORS support label.
        documentation_url: Documentation link.
        featured: Featured flag.
        avg_rating: Mean rating rounded to one decimal (0 when unrated).
        review_count: Number of reviews.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    name: str
    description: str
    base_url: str
    category: str
    auth_type: str | None
    rate_limit: str | None
    https: bool
    cors_policy: str | None
    documentation_url: str | None
    featured: bool
    avg_rating: float
    review_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls, listing: ApiListing, rating: RatingSummary | None = None
    ) -> "ApiListingResult":
        """Build from a listing and its rating summary.

        Args:
            listing: Domain entity.
            rating: Derived rating; None means unrated.

        Returns:
            ApiListingResult.
        """
        rating = rating or RatingSummary()
        return cls(
            id=listing.id,
            name=listing.name,
            description=listing.description,
            base_url=listing.base_url,
            category=listing.category,
            auth_type=listing.auth_type,
            rate_limit=listing.rate_limit,
            https=listing.https,
            cors_policy=listing.cors_policy,
            documentation_url=listing.documentation_url,
            featured=listing.featured,
            avg_rating=rating.avg_rating,
            review_count=rating.review_count,
            created_at=listing.created_at,
            updated_at=listing.updated_at,
        )


@dataclass
class ApiPageResult:
    """Cursor page of API listings."""

    items: list[ApiListingResult]
    next_cursor: UUID | None


@dataclass
class ApiSummaryResult:
    """Minimal listing reference embedded in other resources."""

    id: UUID
    name: str
    category: str

    @classmethod
    def from_entity(cls, listing: ApiListing) -> "ApiSummaryResult":
        """Build from a listing."""
        return cls(id=listing.id, name=listing.name, category=listing.category)


@dataclass
class ReviewAuthorResult:
    """Public author information shown next to a review."""

    id: UUID
    name: str | None
    avatar_url: str | None

    @classmethod
    def from_entity(cls, user: User) -> "ReviewAuthorResult":
        """Build from a user."""
        return cls(id=user.id, name=user.name, avatar_url=user.avatar_url)


@dataclass
class ReviewResult:
    """Review with its author.

    author is None only if the author record no longer exists.
    """

    id: UUID
    api_id: UUID
    user_id: UUID
    rating: int
    content: str | None
    helpful_count: int
    created_at: datetime
    author: ReviewAuthorResult | None = None

    @classmethod
    def from_entity(cls, review: Review, author: User | None) -> "ReviewResult":
        """Build from a review and its author.

        Args:
            review: Domain entity.
            author: Author, if loaded.

        Returns:
            ReviewResult.
        """
        return cls(
            id=review.id,
            api_id=review.api_id,
            user_id=review.user_id,
            rating=review.rating,
            content=review.content,
            helpful_count=review.helpful_count,
            created_at=review.created_at,
            author=ReviewAuthorResult.from_entity(author) if author else None,
        )


@dataclass
class ReviewPageResult:
    """Cursor page of reviews."""

    items: list[ReviewResult]
    next_cursor: UUID | None


@dataclass
class ApiDetailResult:
    """Single listing with rating and its most recent reviews."""

    api: ApiListingResult
    reviews: list[ReviewResult] = field(default_factory=list)


@dataclass
class GroupCountResult:
    """Group name with its row count."""

    name: str
    count: int

    @classmethod
    def from_value(cls, group: GroupCount) -> "GroupCountResult":
        """Build from a GroupCount value object."""
        return cls(name=group.name, count=group.count)
