"""Request history resource handlers.

Handlers:
    create_history_entry - Record a sent request
    list_history         - Cursor-paginated history, newest first
    get_history_entry    - One entry
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from apihub.application.commands.handlers.save_history_entry_handler import (
    SaveHistoryEntryHandler,
)
from apihub.application.commands.history_commands import SaveHistoryEntry
from apihub.application.errors import ApplicationError, ApplicationErrorCode
from apihub.application.queries.handlers.history_handlers import (
    GetHistoryEntryHandler,
    ListHistoryHandler,
)
from apihub.application.queries.history_queries import GetHistoryEntry, ListHistory
from apihub.core.constants import HISTORY_PAGE_SIZE_DEFAULT, HISTORY_PAGE_SIZE_MAX
from apihub.core.container import (
    get_get_history_entry_handler,
    get_list_history_handler,
    get_save_history_entry_handler,
)
from apihub.core.result import Failure
from apihub.presentation.routers.api.middleware.trace_middleware import get_trace_id
from apihub.presentation.routers.api.v1.errors import ErrorResponseBuilder
from apihub.schemas.history_schemas import (
    HistoryCreateRequest,
    HistoryEntryResponse,
    HistoryListResponse,
)


def _map_history_error(error: str) -> ApplicationError:
    """Map handler string error to ApplicationError."""
    error_lower = error.lower()

    if "not found" in error_lower:
        return ApplicationError(code=ApplicationErrorCode.NOT_FOUND, message=error)
    if any(
        marker in error_lower
        for marker in ("must be", "required", "invalid", "unsupported")
    ):
        return ApplicationError(
            code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
            message=error,
        )

    return ApplicationError(
        code=ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
        message=error,
    )


async def create_history_entry(
    request: Request,
    data: HistoryCreateRequest,
    handler: SaveHistoryEntryHandler = Depends(get_save_history_entry_handler),
) -> HistoryEntryResponse | JSONResponse:
    """Record a sent request.

    POST /api/v1/history → 201 Created
    """
    result = await handler.handle(
        SaveHistoryEntry(
            method=data.method,
            url=data.url,
            user_id=data.user_id,
            api_id=data.api_id,
            headers=data.headers,
            body=data.body,
            response_status=data.response_status,
            response_body=data.response_body,
            response_time=data.response_time,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_history_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return HistoryEntryResponse.from_dto(result.value)


async def list_history(
    request: Request,
    user_id: Annotated[
        UUID | None, Query(description="Only this user's entries; omit for all")
    ] = None,
    limit: Annotated[int, Query(ge=1, le=HISTORY_PAGE_SIZE_MAX)] = HISTORY_PAGE_SIZE_DEFAULT,
    cursor: Annotated[UUID | None, Query()] = None,
    handler: ListHistoryHandler = Depends(get_list_history_handler),
) -> HistoryListResponse | JSONResponse:
    """List request history, newest first.

    GET /api/v1/history → 200 OK
    """
    result = await handler.handle(
        ListHistory(user_id=user_id, limit=limit, cursor=cursor)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_history_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return HistoryListResponse.from_dto(result.value)


async def get_history_entry(
    request: Request,
    history_id: Annotated[UUID, Path(description="History entry UUID")],
    handler: GetHistoryEntryHandler = Depends(get_get_history_entry_handler),
) -> HistoryEntryResponse | JSONResponse:
    """Get one history entry.

    GET /api/v1/history/{history_id} → 200 OK
    """
    result = await handler.handle(GetHistoryEntry(history_id=history_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=_map_history_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return HistoryEntryResponse.from_dto(result.value)
