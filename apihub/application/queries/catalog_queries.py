"""Catalog queries (CQRS read operations).

Pattern:
- Queries are data containers (no logic)
- Handlers fetch and return DTOs
- Queries never change state
"""

from dataclasses import dataclass
from uuid import UUID

from apihub.core.constants import API_PAGE_SIZE_DEFAULT


@dataclass(frozen=True, kw_only=True)
class ListApis:
    """List catalog entries, newest first.

    Attributes:
        category: Exact category filter.
        auth_type: Exact auth type filter.
        search: Case-insensitive substring of name or description.
        limit: Page size (1..100).
        cursor: Id of the first row of the requested page.

    Example:
        >>> query = ListApis(search="weather", limit=10)
        >>> result = await handler.handle(query)
    """

    category: str | None = None
    auth_type: str | None = None
    search: str | None = None
    limit: int = API_PAGE_SIZE_DEFAULT
    cursor: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class GetApi:
    """Get one listing with its rating and most recent reviews."""

    api_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListCategories:
    """List categories with their listing counts."""


@dataclass(frozen=True, kw_only=True)
class ListFeaturedApis:
    """List featured listings."""


@dataclass(frozen=True, kw_only=True)
class CompareApis:
    """Load several listings side by side.

    Attributes:
        api_ids: Listings to compare (2..4), in display order.
    """

    api_ids: tuple[UUID, ...]
