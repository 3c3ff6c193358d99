"""HistoryEntry domain entity.

A record of one outbound test request and what came back. Entries are
created only when the user explicitly saves a result and are never
modified afterwards.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True)
class HistoryEntry:
    """Saved test request (append-only).

    Attributes:
        id: Unique entry identifier.
        method: HTTP method as sent (e.g., "GET").
        url: Final URL as sent, query parameters included.
        user_id: Owner, if any.
        api_id: Catalog listing the request targeted, if any.
        headers: Request headers in the order they were sent.
        body: Request body text, if any.
        response_status: HTTP status received (0 when no response).
        response_body: Raw response text.
        response_time: Elapsed milliseconds.
        created_at: When the entry was saved.
    """

    id: UUID
    method: str
    url: str
    user_id: UUID | None = None
    api_id: UUID | None = None
    headers: dict[str, str] | None = None
    body: str | None = None
    response_status: int | None = None
    response_body: str | None = None
    response_time: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
