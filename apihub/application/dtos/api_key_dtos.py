"""API key vault DTOs.

ApiKeyResult never carries secret material. The plaintext key only
leaves the application layer through RevealedApiKeyResult.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from apihub.domain.entities import ApiKey


@dataclass
class ApiKeyResult:
    """Stored API key metadata (no secret)."""

    id: UUID
    name: str
    service: str
    environment: str | None
    expires_at: datetime | None
    last_used_at: datetime | None
    is_expired: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, api_key: ApiKey) -> "ApiKeyResult":
        """Build from an ApiKey entity, dropping the ciphertext."""
        return cls(
            id=api_key.id,
            name=api_key.name,
            service=api_key.service,
            environment=api_key.environment,
            expires_at=api_key.expires_at,
            last_used_at=api_key.last_used_at,
            is_expired=api_key.is_expired(),
            created_at=api_key.created_at,
            updated_at=api_key.updated_at,
        )


@dataclass
class RevealedApiKeyResult:
    """Decrypted API key."""

    id: UUID
    service: str
    key: str
    last_used_at: datetime | None
