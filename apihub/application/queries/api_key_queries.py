"""API key vault queries. None of them return secrets."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ListApiKeys:
    """List stored keys, newest first, optionally filtered."""

    service: str | None = None
    environment: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetApiKey:
    """Get one stored key's metadata."""

    api_key_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListApiKeyServices:
    """List services with their key counts."""
