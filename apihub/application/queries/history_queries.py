"""Request history queries."""

from dataclasses import dataclass
from uuid import UUID

from apihub.core.constants import HISTORY_PAGE_SIZE_DEFAULT


@dataclass(frozen=True, kw_only=True)
class ListHistory:
    """List saved test requests, newest first.

    Attributes:
        user_id: Restrict to one user; None lists every entry.
        limit: Page size (1..50).
        cursor: Id of the first row of the requested page.
    """

    user_id: UUID | None = None
    limit: int = HISTORY_PAGE_SIZE_DEFAULT
    cursor: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class GetHistoryEntry:
    """Get one saved test request."""

    history_id: UUID
