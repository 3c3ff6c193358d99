"""Request history database model.

Append-only: rows are inserted on explicit save and never updated, so
the model derives from BaseModel (no updated_at).

headers uses the generic JSON type rather than JSONB so that header
order survives a round trip.
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apihub.infrastructure.persistence.base import BaseModel


class RequestHistoryModel(BaseModel):
    """Saved test request row.

    Indexes:
        - idx_request_history_user_created: per-user history, newest first
        - idx_request_history_created: global history, newest first
    """

    __tablename__ = "request_history"

    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        comment="Owner",
    )

    api_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("apis.id", ondelete="SET NULL"),
        nullable=True,
        comment="Targeted listing",
    )

    method: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        comment="HTTP method as sent",
    )

    url: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="URL as sent",
    )

    headers: Mapped[dict[str, str] | None] = mapped_column(
        JSON,
        nullable=True,
        comment="Request headers as sent",
    )

    body: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Request body as sent",
    )

    response_status: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="HTTP status received (0 when no response)",
    )

    response_body: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Raw response text",
    )

    response_time: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Elapsed milliseconds",
    )

    __table_args__ = (
        Index("idx_request_history_user_created", "user_id", "created_at"),
        Index("idx_request_history_created", "created_at"),
    )
