"""API key vault request and response schemas.

Responses never carry the secret except RevealedApiKeyResponse.
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from apihub.application.dtos.api_key_dtos import ApiKeyResult, RevealedApiKeyResult
from apihub.schemas.common_schemas import GroupCountResponse


# =============================================================================
# Request Schemas
# =============================================================================


class ApiKeyCreateRequest(BaseModel):
    """Store a new API key."""

    name: str = Field(..., min_length=1, max_length=100, examples=["OpenAI prod"])
    service: str = Field(..., min_length=1, max_length=100, examples=["openai"])
    key: str = Field(..., min_length=1, description="Secret, encrypted at rest")
    environment: str | None = Field(None, max_length=50, examples=["production"])
    expires_at: datetime | None = None


class ApiKeyUpdateRequest(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    name: str | None = Field(None, min_length=1, max_length=100)
    key: str | None = Field(None, min_length=1)
    environment: str | None = Field(None, max_length=50)
    expires_at: datetime | None = None


# =============================================================================
# Response Schemas
# =============================================================================


class ApiKeyResponse(BaseModel):
    """Stored key metadata."""

    id: UUID
    name: str
    service: str
    environment: str | None = None
    expires_at: datetime | None = None
    last_used_at: datetime | None = None
    is_expired: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: ApiKeyResult) -> "ApiKeyResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            name=dto.name,
            service=dto.service,
            environment=dto.environment,
            expires_at=dto.expires_at,
            last_used_at=dto.last_used_at,
            is_expired=dto.is_expired,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class ApiKeyListResponse(BaseModel):
    """Stored keys, newest first."""

    items: list[ApiKeyResponse]

    @classmethod
    def from_dto(cls, dto: list[ApiKeyResult]) -> "ApiKeyListResponse":
        """Convert application DTOs to response schema."""
        return cls(items=[ApiKeyResponse.from_dto(item) for item in dto])


class RevealedApiKeyResponse(BaseModel):
    """Decrypted key."""

    id: UUID
    service: str
    key: str
    last_used_at: datetime | None = None

    @classmethod
    def from_dto(cls, dto: RevealedApiKeyResult) -> "RevealedApiKeyResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            service=dto.service,
            key=dto.key,
            last_used_at=dto.last_used_at,
        )


class ApiKeyServiceListResponse(BaseModel):
    """Services with their stored key count."""

    items: list[GroupCountResponse]
