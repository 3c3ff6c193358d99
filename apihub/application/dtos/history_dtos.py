"""Request history DTOs."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apihub.application.dtos.catalog_dtos import ApiSummaryResult
from apihub.domain.entities import ApiListing, HistoryEntry


@dataclass
class HistoryEntryResult:
    """Saved test request.

    Attributes:
        id: Entry identifier.
        user_id: Owner, if any.
        api_id: Targeted listing, if any.
        method: HTTP method as sent.
        url: URL as sent.
        headers: Request headers as sent.
        body: Request body as sent.
        response_status: Status received (0 when no response).
        response_body: Raw response text.
        response_time: Elapsed milliseconds.
        created_at: When the entry was saved.
        api: Summary of the targeted listing, if it still exists.
    """

    id: UUID
    user_id: UUID | None
    api_id: UUID | None
    method: str
    url: str
    headers: dict[str, str] | None
    body: str | None
    response_status: int | None
    response_body: str | None
    response_time: int | None
    created_at: datetime
    api: ApiSummaryResult | None = None

    @classmethod
    def from_entity(
        cls, entry: HistoryEntry, api: ApiListing | None = None
    ) -> "HistoryEntryResult":
        """Build from an entry and (optionally) its targeted listing.

        Args:
            entry: Domain entity.
            api: Targeted listing, if loaded.

        Returns:
            HistoryEntryResult.
        """
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            api_id=entry.api_id,
            method=entry.method,
            url=entry.url,
            headers=entry.headers,
            body=entry.body,
            response_status=entry.response_status,
            response_body=entry.response_body,
            response_time=entry.response_time,
            created_at=entry.created_at,
            api=ApiSummaryResult.from_entity(api) if api else None,
        )


@dataclass
class HistoryPageResult:
    """Cursor page of history entries."""

    items: list[HistoryEntryResult]
    next_cursor: UUID | None
