"""ApiKey domain entity.

A credential for a third-party service, kept in the vault so it can be
reused when testing endpoints. The secret itself is stored encrypted
(AES-256-GCM); the entity only ever carries ciphertext.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class ApiKey:
    """Stored third-party API credential.

    Attributes:
        id: Unique key identifier.
        name: Label chosen by the user (e.g., "Staging token").
        service: Service the key belongs to (e.g., "GitHub").
        encrypted_key: AES-256-GCM ciphertext of the secret.
        environment: Optional environment label (e.g., "production").
        expires_at: Optional expiry timestamp.
        last_used_at: When the secret was last revealed.
        created_at: When the key was stored.
        updated_at: When the key was last modified.
    """

    id: UUID
    name: str
    service: str
    encrypted_key: bytes
    environment: str | None = None
    expires_at: datetime | None = None
    last_used_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the key is past its expiry.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            bool: True if expires_at is set and in the past.
        """
        if self.expires_at is None:
            return False
        reference = now or datetime.now(UTC)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=UTC)
        return expires_at <= reference

    def mark_used(self) -> None:
        """Stamp last_used_at with the current time."""
        now = datetime.now(UTC)
        self.last_used_at = now
        self.updated_at = now

    def __repr__(self) -> str:
        """Return repr without secret material.

        Returns:
            str: String representation.
        """
        return f"ApiKey(id={self.id}, name={self.name!r}, service={self.service!r})"
