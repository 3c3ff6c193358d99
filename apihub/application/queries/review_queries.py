"""Review queries."""

from dataclasses import dataclass
from uuid import UUID

from apihub.core.constants import REVIEW_PAGE_SIZE_DEFAULT
from apihub.domain.enums import ReviewSort


@dataclass(frozen=True, kw_only=True)
class ListReviews:
    """List reviews of one listing.

    Attributes:
        api_id: Reviewed listing.
        sort_by: recent, highest or lowest.
        limit: Page size (1..50).
        cursor: Id of the first row of the requested page.
    """

    api_id: UUID
    sort_by: ReviewSort = ReviewSort.RECENT
    limit: int = REVIEW_PAGE_SIZE_DEFAULT
    cursor: UUID | None = None
