"""User database model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from apihub.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """User row.

    Fields:
        id, created_at, updated_at: From BaseMutableModel
        email: Unique email address
        name: Optional display name
        avatar_url: Optional avatar image URL
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique email address",
    )

    name: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Display name",
    )

    avatar_url: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Avatar image URL",
    )
