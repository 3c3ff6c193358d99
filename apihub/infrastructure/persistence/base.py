"""Base model and mixins for all database tables.

This module provides:
- BaseModel: Base class for ALL models (id, created_at)
- TimestampMixin: Adds updated_at
- BaseMutableModel: Base for rows that can be updated

Domain entities do NOT inherit from these; repositories map between the
two.

Architecture:
    BaseModel (id, created_at)
        ├── BaseMutableModel (+ updated_at)
        │   ├── UserModel, ApiModel, ReviewModel, ApiKeyModel
        │
        └── RequestHistoryModel (append-only, no updated_at)

The generic Uuid type keeps models portable between PostgreSQL (asyncpg)
and SQLite (aiosqlite, used for tests and local runs).
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


def utc_now() -> datetime:
    """Current UTC time (Python-side column default)."""
    return datetime.now(UTC)


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUIDv7 primary key (time-ordered)
    - created_at: Creation timestamp (UTC, microsecond precision)

    created_at is filled in Python as well as by the database so that rows
    inserted in quick succession keep a strict order on SQLite, whose
    CURRENT_TIMESTAMP has one-second resolution.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging).

        Returns:
            dict: id and created_at.
        """
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() with updated_at.

        Returns:
            dict: Dictionary representation including updated_at.
        """
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at).

    Use BaseModel directly for append-only tables such as request history.
    """

    __abstract__ = True
