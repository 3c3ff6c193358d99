"""Request history request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from apihub.application.dtos.history_dtos import HistoryEntryResult, HistoryPageResult
from apihub.schemas.api_schemas import ApiSummaryResponse
from apihub.schemas.common_schemas import CursorPageMeta


class HistoryCreateRequest(BaseModel):
    """Record of a request the user sent.

    Method and URL are stored as sent, and the method is not limited to
    the verbs the tester can dispatch.
    """

    method: str = Field(..., min_length=1, max_length=10, examples=["GET"])
    url: str = Field(..., min_length=1, examples=["https://api.github.com/users/octocat"])
    user_id: UUID | None = Field(None, description="Owner")
    api_id: UUID | None = Field(None, description="Targeted catalog listing")
    headers: dict[str, str] | None = None
    body: str | None = None
    response_status: int | None = Field(None, ge=0)
    response_body: str | None = None
    response_time: int | None = Field(None, ge=0, description="Milliseconds")


class HistoryEntryResponse(BaseModel):
    """Single history entry."""

    id: UUID
    user_id: UUID | None = None
    api_id: UUID | None = None
    method: str
    url: str
    headers: dict[str, str] | None = None
    body: str | None = None
    response_status: int | None = None
    response_body: str | None = None
    response_time: int | None = None
    created_at: datetime
    api: ApiSummaryResponse | None = Field(
        None, description="Targeted listing, if it still exists"
    )

    @classmethod
    def from_dto(cls, dto: HistoryEntryResult) -> "HistoryEntryResponse":
        """Convert application DTO to response schema.

        Args:
            dto: HistoryEntryResult from handler.

        Returns:
            HistoryEntryResponse for API response.
        """
        return cls(
            id=dto.id,
            user_id=dto.user_id,
            api_id=dto.api_id,
            method=dto.method,
            url=dto.url,
            headers=dto.headers,
            body=dto.body,
            response_status=dto.response_status,
            response_body=dto.response_body,
            response_time=dto.response_time,
            created_at=dto.created_at,
            api=ApiSummaryResponse.from_dto(dto.api) if dto.api is not None else None,
        )


class HistoryListResponse(CursorPageMeta):
    """Cursor page of history entries, newest first."""

    items: list[HistoryEntryResponse]

    @classmethod
    def from_dto(cls, dto: HistoryPageResult) -> "HistoryListResponse":
        """Convert application DTO to response schema."""
        return cls(
            items=[HistoryEntryResponse.from_dto(item) for item in dto.items],
            next_cursor=dto.next_cursor,
        )
