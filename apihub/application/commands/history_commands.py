"""Request history commands."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class SaveHistoryEntry:
    """Save a test request and its response to history.

    Saving is always an explicit user action; executing a test request
    never saves on its own.

    Attributes:
        method: HTTP method as sent.
        url: URL as sent.
        user_id: Owner, if any.
        api_id: Targeted catalog listing, if any.
        headers: Request headers as sent.
        body: Request body as sent.
        response_status: Status received.
        response_body: Raw response text.
        response_time: Elapsed milliseconds.
    """

    method: str
    url: str
    user_id: UUID | None = None
    api_id: UUID | None = None
    headers: dict[str, str] | None = None
    body: str | None = None
    response_status: int | None = None
    response_body: str | None = None
    response_time: int | None = None
