"""Request history repository implementation.

Insert-only: save() always adds a new row and there is no update path.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.domain.entities.history_entry import HistoryEntry
from apihub.domain.value_objects import CursorPage
from apihub.infrastructure.persistence.models.request_history import (
    RequestHistoryModel,
)
from apihub.infrastructure.persistence.pagination import SortKey, fetch_page

_NEWEST_FIRST = (SortKey(RequestHistoryModel.created_at), SortKey(RequestHistoryModel.id))


class HistoryRepository:
    """SQLAlchemy implementation of HistoryRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def save(self, entry: HistoryEntry) -> None:
        """Append a history entry.

        Args:
            entry: Entry to persist.
        """
        self._session.add(self._to_model(entry))
        await self._session.flush()

    async def find_by_id(self, history_id: UUID) -> HistoryEntry | None:
        """Find entry by ID.

        Args:
            history_id: Entry identifier.

        Returns:
            HistoryEntry if found, None otherwise.
        """
        model = await self._session.get(RequestHistoryModel, history_id)
        if model is None:
            return None
        return self._to_entity(model)

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
        stmt = select(RequestHistoryModel)
        if user_id is not None:
            stmt = stmt.where(RequestHistoryModel.user_id == user_id)

        models, next_cursor = await fetch_page(
            self._session,
            stmt,
            keys=_NEWEST_FIRST,
            id_column=RequestHistoryModel.id,
            limit=limit,
            cursor=cursor,
        )
        return CursorPage(
            items=[self._to_entity(model) for model in models],
            next_cursor=next_cursor,
        )

    def _to_entity(self, model: RequestHistoryModel) -> HistoryEntry:
        """Map database model to domain entity."""
        return HistoryEntry(
            id=model.id,
            method=model.method,
            url=model.url,
            user_id=model.user_id,
            api_id=model.api_id,
            headers=dict(model.headers) if model.headers is not None else None,
            body=model.body,
            response_status=model.response_status,
            response_body=model.response_body,
            response_time=model.response_time,
            created_at=model.created_at,
        )

    def _to_model(self, entity: HistoryEntry) -> RequestHistoryModel:
        """Map domain entity to database model."""
        return RequestHistoryModel(
            id=entity.id,
            method=entity.method,
            url=entity.url,
            user_id=entity.user_id,
            api_id=entity.api_id,
            headers=entity.headers,
            body=entity.body,
            response_status=entity.response_status,
            response_body=entity.response_body,
            response_time=entity.response_time,
            created_at=entity.created_at,
        )
