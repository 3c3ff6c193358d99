"""API key vault query handlers.

None of these handlers decrypt anything; secrets are only exposed by
the RevealApiKey command.
"""

from apihub.application.dtos import ApiKeyResult, GroupCountResult
from apihub.application.queries.api_key_queries import (
    GetApiKey,
    ListApiKeys,
    ListApiKeyServices,
)
from apihub.core.result import Failure, Result, Success
from apihub.domain.protocols.api_key_repository import ApiKeyRepository


class ApiKeyQueryError:
    """API key query errors."""

    API_KEY_NOT_FOUND = "API key not found"


class ListApiKeysHandler:
    """Handler for ListApiKeys query."""

    def __init__(self, api_key_repo: ApiKeyRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            api_key_repo: API key repository.
        """
        self._api_key_repo = api_key_repo

    async def handle(self, query: ListApiKeys) -> Result[list[ApiKeyResult], str]:
        """Handle ListApiKeys query.

        Args:
            query: Optional service and environment filters.

        Returns:
            Success(list[ApiKeyResult]): Keys newest first.
        """
        keys = await self._api_key_repo.list_all(
            service=query.service or None,
            environment=query.environment or None,
        )
        return Success(value=[ApiKeyResult.from_entity(key) for key in keys])


class GetApiKeyHandler:
    """Handler for GetApiKey query."""

    def __init__(self, api_key_repo: ApiKeyRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            api_key_repo: API key repository.
        """
        self._api_key_repo = api_key_repo

    async def handle(self, query: GetApiKey) -> Result[ApiKeyResult, str]:
        """Handle GetApiKey query.

        Returns:
            Success(ApiKeyResult): Key found.
            Failure(error): Key does not exist.
        """
        api_key = await self._api_key_repo.find_by_id(query.api_key_id)
        if api_key is None:
            return Failure(error=ApiKeyQueryError.API_KEY_NOT_FOUND)
        return Success(value=ApiKeyResult.from_entity(api_key))


class ListApiKeyServicesHandler:
    """Handler for ListApiKeyServices query."""

    def __init__(self, api_key_repo: ApiKeyRepository) -> None:
        """Initialize handler with dependencies.

        Args:
            api_key_repo: API key repository.
        """
        self._api_key_repo = api_key_repo

    async def handle(
        self, query: ListApiKeyServices
    ) -> Result[list[GroupCountResult], str]:
        """Handle ListApiKeyServices query.

        Returns:
            Success(list[GroupCountResult]): Services by descending count.
        """
        groups = await self._api_key_repo.list_services()
        return Success(value=[GroupCountResult.from_value(group) for group in groups])
