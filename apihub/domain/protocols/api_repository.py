"""API listing repository protocol.

Defines the interface for catalog persistence operations. Listings are
mostly seeded and read; ratings are NOT computed here (see
ReviewRepository.rating_summaries).
"""

from typing import Protocol
from uuid import UUID

from apihub.domain.entities.api_listing import ApiListing
from apihub.domain.value_objects import CursorPage, GroupCount


class ApiRepository(Protocol):
    """Protocol for API listing persistence operations.

    **Design Principles**:
    - Read methods return domain entities (ApiListing), not database models
    - Listings are ordered newest first everywhere
    - Pagination follows the cursor contract of CursorPage
    """

    async def find_by_id(self, api_id: UUID) -> ApiListing | None:
        """Find listing by ID.

        Args:
            api_id: Listing identifier.

        Returns:
            ApiListing if found, None otherwise.
        """
        ...

    async def find_by_ids(self, api_ids: list[UUID]) -> dict[UUID, ApiListing]:
        """Load several listings at once.

        Args:
            api_ids: Listing identifiers (duplicates allowed).

        Returns:
            Mapping of id to listing; unknown ids are absent.
        """
        ...

    async def list_page(
        self,
        *,
        limit: int,
        cursor: UUID | None = None,
        category: str | None = None,
        auth_type: str | None = None,
        search: str | None = None,
    ) -> CursorPage[ApiListing]:
        """List listings newest first, filtered and cursor-paginated.

        Args:
            limit: Page size.
            cursor: Id of the row the page starts at (inclusive).
            category: Exact category filter.
            auth_type: Exact auth type filter.
            search: Case-insensitive substring matched against name OR
                description.

        Returns:
            CursorPage of listings.

        Example:
            >>> page = await repo.list_page(limit=20, search="pokemon")
            >>> page.next_cursor  # None on the last page
        """
        ...

    async def list_featured(self, limit: int) -> list[ApiListing]:
        """List featured listings newest first.

        Args:
            limit: Maximum number of listings.

        Returns:
            Featured listings.
        """
        ...

    async def list_categories(self) -> list[GroupCount]:
        """Group listings by category.

        Returns:
            Categories with their listing count, count descending.
            Empty category names are omitted.
        """
        ...

    async def save(self, listing: ApiListing) -> None:
        """Create or update a listing.

        Args:
            listing: Listing to persist.
        """
        ...
