"""Review repository protocol."""

from typing import Protocol
from uuid import UUID

from apihub.domain.entities.review import Review
from apihub.domain.enums import ReviewSort
from apihub.domain.value_objects import CursorPage, RatingSummary


class ReviewRepository(Protocol):
    """Protocol for review persistence and rating aggregation."""

    async def find_by_id(self, review_id: UUID) -> Review | None:
        """Find review by ID.

        Args:
            review_id: Review identifier.

        Returns:
            Review if found, None otherwise.
        """
        ...

    async def save(self, review: Review) -> None:
        """Create or update a review.

        Args:
            review: Review to persist.
        """
        ...

    async def list_page(
        self,
        *,
        api_id: UUID,
        sort_by: ReviewSort,
        limit: int,
        cursor: UUID | None = None,
    ) -> CursorPage[Review]:
        """List reviews of one listing, cursor-paginated.

        Args:
            api_id: Reviewed listing.
            sort_by: RECENT (created_at desc), HIGHEST (rating desc) or
                LOWEST (rating asc); ties newest first.
            limit: Page size.
            cursor: Id of the row the page starts at (inclusive).

        Returns:
            CursorPage of reviews.
        """
        ...

    async def list_recent(self, api_id: UUID, limit: int) -> list[Review]:
        """List the most recent reviews of one listing.

        Args:
            api_id: Reviewed listing.
            limit: Maximum number of reviews.

        Returns:
            Reviews newest first.
        """
        ...

    async def rating_summaries(self, api_ids: list[UUID]) -> dict[UUID, RatingSummary]:
        """Aggregate ratings per listing.

        Args:
            api_ids: Listings to aggregate.

        Returns:
            Mapping of every requested id to its summary; listings without
            reviews map to RatingSummary(0.0, 0).
        """
        ...

    async def apply_vote(self, review_id: UUID, delta: int) -> Review | None:
        """Atomically add delta to a review's helpful_count.

        Args:
            review_id: Review identifier.
            delta: +1 or -1. No bounds are enforced.

        Returns:
            Updated review, or None if it does not exist.
        """
        ...
