"""API key vault commands."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class CreateApiKey:
    """Store a new API key (encrypted at rest).

    Attributes:
        name: Label (1..100 chars).
        service: Service name (1..100 chars).
        key: Plaintext secret.
        environment: Optional environment label (max 50 chars).
        expires_at: Optional expiry.
    """

    name: str
    service: str
    key: str
    environment: str | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateApiKey:
    """Change some fields of a stored key.

    Only fields that are not None are applied.
    """

    api_key_id: UUID
    name: str | None = None
    key: str | None = None
    environment: str | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteApiKey:
    """Delete a stored key."""

    api_key_id: UUID


@dataclass(frozen=True, kw_only=True)
class RevealApiKey:
    """Decrypt a stored key and stamp its last use."""

    api_key_id: UUID
