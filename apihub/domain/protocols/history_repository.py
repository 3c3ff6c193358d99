"""Request history repository protocol.

History is append-only: there is no update or delete operation.
"""

from typing import Protocol
from uuid import UUID

from apihub.domain.entities.history_entry import HistoryEntry
from apihub.domain.value_objects import CursorPage


class HistoryRepository(Protocol):
    """Protocol for saved test request persistence."""

    async def save(self, entry: HistoryEntry) -> None:
        """Append a history entry.

        Args:
            entry: Entry to persist.
        """
        ...

    async def find_by_id(self, history_id: UUID) -> HistoryEntry | None:
        """Find entry by ID.

        Args:
            history_id: Entry identifier.

        Returns:
            HistoryEntry if found, None otherwise.
        """
        ...

    async def list_page(
        self,
        *,
        limit: int,
        cursor: UUID | None = None,
        user_id: UUID | None = None,
    ) -> CursorPage[HistoryEntry]:
        """List entries newest first, cursor-paginated.

        Args:
            limit: Page size.
            cursor: Id of the row the page starts at (inclusive).
            user_id: Restrict to one user; None lists every entry.

        Returns:
            CursorPage of entries.
        """
        ...
