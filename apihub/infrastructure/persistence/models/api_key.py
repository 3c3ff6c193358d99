"""API key vault database model."""

from datetime import datetime

from sqlalchemy import DateTime, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from apihub.infrastructure.persistence.base import BaseMutableModel


class ApiKeyModel(BaseMutableModel):
    """Stored API key row.

    encrypted_key holds AES-256-GCM output (IV || ciphertext || tag);
    plaintext is never stored.
    """

    __tablename__ = "api_keys"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="User-chosen label",
    )

    service: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        index=True,
        comment="Service the key belongs to",
    )

    encrypted_key: Mapped[bytes] = mapped_column(
        LargeBinary,
        nullable=False,
        comment="AES-256-GCM encrypted secret",
    )

    environment: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
        index=True,
        comment="Environment label (e.g., 'production')",
    )

    expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Expiry timestamp",
    )

    last_used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="When the key was last revealed",
    )
