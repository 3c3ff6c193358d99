"""Request history handler dependency factories."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from apihub.application.commands.handlers.save_history_entry_handler import (
        SaveHistoryEntryHandler,
    )
    from apihub.application.queries.handlers.history_handlers import (
        GetHistoryEntryHandler,
        ListHistoryHandler,
    )


async def get_save_history_entry_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "SaveHistoryEntryHandler":
    """Get SaveHistoryEntry command handler (request-scoped)."""
    from apihub.application.commands.handlers.save_history_entry_handler import (
        SaveHistoryEntryHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        HistoryRepository,
        UserRepository,
    )

    return SaveHistoryEntryHandler(
        history_repo=HistoryRepository(session=session),
        api_repo=ApiRepository(session=session),
        user_repo=UserRepository(session=session),
        logger=get_logger(),
    )


async def get_list_history_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListHistoryHandler":
    """Get ListHistory query handler (request-scoped)."""
    from apihub.application.queries.handlers.history_handlers import (
        ListHistoryHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        HistoryRepository,
    )

    return ListHistoryHandler(
        history_repo=HistoryRepository(session=session),
        api_repo=ApiRepository(session=session),
    )


async def get_get_history_entry_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetHistoryEntryHandler":
    """Get GetHistoryEntry query handler (request-scoped)."""
    from apihub.application.queries.handlers.history_handlers import (
        GetHistoryEntryHandler,
    )
    from apihub.infrastructure.persistence.repositories import (
        ApiRepository,
        HistoryRepository,
    )

    return GetHistoryEntryHandler(
        history_repo=HistoryRepository(session=session),
        api_repo=ApiRepository(session=session),
    )
