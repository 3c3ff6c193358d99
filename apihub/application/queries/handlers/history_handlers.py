"""Request history query handlers.

Handlers:
    - ListHistoryHandler: Cursor page of saved requests, newest first
    - GetHistoryEntryHandler: Single saved request
"""

from apihub.application.dtos import HistoryEntryResult, HistoryPageResult
from apihub.application.queries.history_queries import GetHistoryEntry, ListHistory
from apihub.core.constants import HISTORY_PAGE_SIZE_MAX
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.api_repository import ApiRepository
from apihub.domain.protocols.history_repository import HistoryRepository


class HistoryQueryError:
    """History query errors."""

    ENTRY_NOT_FOUND = "History entry not found"
    INVALID_LIMIT = f"Limit must be between 1 and {HISTORY_PAGE_SIZE_MAX}"


class ListHistoryHandler:
    """Handler for ListHistory query.

    Each item embeds a summary of the listing it targeted, when there is
    one.
    """

    def __init__(
        self,
        history_repo: HistoryRepository,
        api_repo: ApiRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            history_repo: History repository.
            api_repo: API listing repository.
        """
        self._history_repo = history_repo
        self._api_repo = api_repo

    async def handle(self, query: ListHistory) -> Result[HistoryPageResult, str]:
        """Handle ListHistory query.

        Args:
            query: Optional user filter and pagination.

        Returns:
            Success(HistoryPageResult): Page of entries.
            Failure(error): Limit out of range.
        """
        if not 1 <= query.limit <= HISTORY_PAGE_SIZE_MAX:
            return Failure(error=HistoryQueryError.INVALID_LIMIT)

        page = await self._history_repo.list_page(
            limit=query.limit,
            cursor=query.cursor,
            user_id=query.user_id,
        )
        apis = await self._api_repo.find_by_ids(
            list({entry.api_id for entry in page.items if entry.api_id is not None})
        )

        return Success(
            value=HistoryPageResult(
                items=[
                    HistoryEntryResult.from_entity(
                        entry, apis.get(entry.api_id) if entry.api_id else None
                    )
                    for entry in page.items
                ],
                next_cursor=page.next_cursor,
            )
        )


class GetHistoryEntryHandler:
    """Handler for GetHistoryEntry query."""

    def __init__(
        self,
        history_repo: HistoryRepository,
        api_repo: ApiRepository,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            history_repo: History repository.
            api_repo: API listing repository.
        """
        self._history_repo = history_repo
        self._api_repo = api_repo

    async def handle(self, query: GetHistoryEntry) -> Result[HistoryEntryResult, str]:
        """Handle GetHistoryEntry query.

        Args:
            query: Entry id.

        Returns:
            Success(HistoryEntryResult): Entry found.
            Failure(error): Entry does not exist.
        """
        entry = await self._history_repo.find_by_id(query.history_id)
        if entry is None:
            return Failure(error=HistoryQueryError.ENTRY_NOT_FOUND)

        api = await self._api_repo.find_by_id(entry.api_id) if entry.api_id else None
        return Success(value=HistoryEntryResult.from_entity(entry, api))
