"""Review commands."""

from dataclasses import dataclass
from uuid import UUID

from apihub.domain.enums import VoteDirection


@dataclass(frozen=True, kw_only=True)
class CreateReview:
    """Write a review for an API listing.

    Attributes:
        api_id: Listing being reviewed.
        user_id: Author.
        rating: Score between 1 and 5.
        content: Optional comment.

    Example:
        >>> command = CreateReview(api_id=api_id, user_id=user_id, rating=5)
        >>> result = await handler.handle(command)
    """

    api_id: UUID
    user_id: UUID
    rating: int
    content: str | None = None


@dataclass(frozen=True, kw_only=True)
class VoteReview:
    """Vote a review up or down.

    Attributes:
        review_id: Review to vote on.
        direction: UP adds one to helpful_count, DOWN subtracts one.
    """

    review_id: UUID
    direction: VoteDirection
