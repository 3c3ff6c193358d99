"""API listing database model.

Catalog entries are seeded (alembic/seeds) and read far more often than
written. Ratings are not stored here; they are aggregated from reviews.
"""

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from apihub.infrastructure.persistence.base import BaseMutableModel


class ApiModel(BaseMutableModel):
    """Catalog listing row.

    Indexes:
        - ix_apis_category: category filter and grouping
        - idx_apis_created_id: newest-first keyset pagination
        - idx_apis_featured_created: featured listing
    """

    __tablename__ = "apis"

    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        index=True,
        comment="Display name (e.g., 'PokeAPI')",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        comment="Free-text description",
    )

    base_url: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        comment="Root URL of the API",
    )

    category: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Catalog category",
    )

    auth_type: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="Auth requirement label (e.g., 'None', 'Api Key')",
    )

    rate_limit: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Rate limit label (e.g., '100/min')",
    )

    https: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Served over HTTPS",
    )

    cors_policy: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        comment="CORS support label ('Yes', 'No', 'Unknown')",
    )

    documentation_url: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Documentation link",
    )

    featured: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Shown in the featured set",
    )

    __table_args__ = (
        Index("idx_apis_created_id", "created_at", "id"),
        Index("idx_apis_featured_created", "featured", "created_at"),
    )
