"""Review database model."""

from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from apihub.infrastructure.persistence.base import BaseMutableModel


class ReviewModel(BaseMutableModel):
    """Review row.

    helpful_count is updated in place by votes (UPDATE ... SET
    helpful_count = helpful_count + delta) and has no bounds.

    Indexes:
        - idx_reviews_api_created: recent reviews of a listing
        - idx_reviews_api_rating: rating-sorted reviews of a listing
    """

    __tablename__ = "reviews"

    api_id: Mapped[UUID] = mapped_column(
        ForeignKey("apis.id", ondelete="CASCADE"),
        nullable=False,
        comment="Reviewed listing",
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Author",
    )

    rating: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Score between 1 and 5",
    )

    content: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Optional comment",
    )

    helpful_count: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="Net helpfulness votes (may be negative)",
    )

    __table_args__ = (
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
        Index("idx_reviews_api_created", "api_id", "created_at"),
        Index("idx_reviews_api_rating", "api_id", "rating"),
    )
