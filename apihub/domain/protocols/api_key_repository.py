"""API key vault repository protocol."""

from typing import Protocol
from uuid import UUID

from apihub.domain.entities.api_key import ApiKey
from apihub.domain.value_objects import GroupCount


class ApiKeyRepository(Protocol):
    """Protocol for stored API key persistence.

    Implementations store and return ciphertext only; encryption is the
    caller's concern.
    """

    async def find_by_id(self, api_key_id: UUID) -> ApiKey | None:
        """Find key by ID.

        Args:
            api_key_id: Key identifier.

        Returns:
            ApiKey if found, None otherwise.
        """
        ...

    async def list_all(
        self,
        *,
        service: str | None = None,
        environment: str | None = None,
    ) -> list[ApiKey]:
        """List keys newest first.

        Args:
            service: Exact service filter.
            environment: Exact environment filter.

        Returns:
            Matching keys.
        """
        ...

    async def list_services(self) -> list[GroupCount]:
        """Group keys by service.

        Returns:
            Services with their key count, count descending.
        """
        ...

    async def save(self, api_key: ApiKey) -> None:
        """Create or update a key.

        Args:
            api_key: Key to persist.
        """
        ...

    async def delete(self, api_key_id: UUID) -> bool:
        """Delete a key.

        Args:
            api_key_id: Key identifier.

        Returns:
            True if a key was deleted, False if it did not exist.
        """
        ...
