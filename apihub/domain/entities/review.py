"""Review domain entity.

A user's rating (1..5) and optional comment on one API listing.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class Review:
    """Rating and optional comment left by a user on an API listing.

    helpful_count is changed only through votes (+1/-1 per vote) and has
    no floor or ceiling; it can go negative.

    Attributes:
        id: Unique review identifier.
        api_id: Reviewed listing.
        user_id: Author.
        rating: Integer score between 1 and 5.
        content: Optional free-text comment.
        helpful_count: Net helpfulness votes.
        created_at: When the review was written.
        updated_at: When the review was last modified.
    """

    id: UUID
    api_id: UUID
    user_id: UUID
    rating: int
    content: str | None = None
    helpful_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate rating range.

        Raises:
            ValueError: If rating is outside 1..5.
        """
        if not MIN_RATING <= self.rating <= MAX_RATING:
            raise ValueError(
                f"Review rating must be between {MIN_RATING} and {MAX_RATING}"
            )
