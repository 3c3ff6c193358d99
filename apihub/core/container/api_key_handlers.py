"""API key vault handler dependency factories.

Command handlers get the encryption service; query handlers only ever see
ciphertext and do not.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from apihub.core.container.infrastructure import (
    get_db_session,
    get_encryption_service,
    get_logger,
)

if TYPE_CHECKING:
    from apihub.application.commands.handlers.api_key_handlers import (
        CreateApiKeyHandler,
        DeleteApiKeyHandler,
        RevealApiKeyHandler,
        UpdateApiKeyHandler,
    )
    from apihub.application.queries.handlers.api_key_handlers import (
        GetApiKeyHandler,
        ListApiKeyServicesHandler,
        ListApiKeysHandler,
    )


# ============================================================================
# Command Handler Factories (Request-Scoped)
# ============================================================================


async def get_create_api_key_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateApiKeyHandler":
    """Get CreateApiKey command handler (request-scoped)."""
    from apihub.application.commands.handlers.api_key_handlers import (
        CreateApiKeyHandler,
    )
    from apihub.infrastructure.persistence.repositories import ApiKeyRepository

    return CreateApiKeyHandler(
        api_key_repo=ApiKeyRepository(session=session),
        encryption=get_encryption_service(),
        logger=get_logger(),
    )


async def get_update_api_key_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateApiKeyHandler":
    """Get UpdateApiKey command handler (request-scoped)."""
    from apihub.application.commands.handlers.api_key_handlers import (
        UpdateApiKeyHandler,
    )
    from apihub.infrastructure.persistence.repositories import ApiKeyRepository

    return UpdateApiKeyHandler(
        api_key_repo=ApiKeyRepository(session=session),
        encryption=get_encryption_service(),
        logger=get_logger(),
    )


async def get_delete_api_key_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteApiKeyHandler":
    """Get DeleteApiKey command handler (request-scoped)."""
    from apihub.application.commands.handlers.api_key_handlers import (
        DeleteApiKeyHandler,
    )
    from apihub.infrastructure.persistence.repositories import ApiKeyRepository

    return DeleteApiKeyHandler(
        api_key_repo=ApiKeyRepository(session=session),
        logger=get_logger(),
    )


async def get_reveal_api_key_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RevealApiKeyHandler":
    """Get RevealApiKey command handler (request-scoped)."""
    from apihub.application.commands.handlers.api_key_handlers import (
        RevealApiKeyHandler,
    )
    from apihub.infrastructure.persistence.repositories import ApiKeyRepository

    return RevealApiKeyHandler(
        api_key_repo=ApiKeyRepository(session=session),
        encryption=get_encryption_service(),
        logger=get_logger(),
    )


# ============================================================================
# Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_list_api_keys_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListApiKeysHandler":
    """Get ListApiKeys query handler (request-scoped)."""
    from apihub.application.queries.handlers.api_key_handlers import (
        ListApiKeysHandler,
    )
    from apihub.infrastructure.persistence.repositories import ApiKeyRepository

    return ListApiKeysHandler(api_key_repo=ApiKeyRepository(session=session))


async def get_get_api_key_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetApiKeyHandler":
    """Get GetApiKey query handler (request-scoped)."""
    from apihub.application.queries.handlers.api_key_handlers import GetApiKeyHandler
    from apihub.infrastructure.persistence.repositories import ApiKeyRepository

    return GetApiKeyHandler(api_key_repo=ApiKeyRepository(session=session))


async def get_list_api_key_services_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListApiKeyServicesHandler":
    """Get ListApiKeyServices query handler (request-scoped)."""
    from apihub.application.queries.handlers.api_key_handlers import (
        ListApiKeyServicesHandler,
    )
    from apihub.infrastructure.persistence.repositories import ApiKeyRepository

    return ListApiKeyServicesHandler(api_key_repo=ApiKeyRepository(session=session))
