"""API key vault command handlers.

Handlers:
    - CreateApiKeyHandler: Encrypt and store a new key
    - UpdateApiKeyHandler: Apply a partial update (re-encrypting a new key)
    - DeleteApiKeyHandler: Remove a key
    - RevealApiKeyHandler: Decrypt a key and stamp last_used_at

Secrets are encrypted with AES-256-GCM before they reach the repository
and are never logged.
"""

from datetime import UTC, datetime

from uuid_extensions import uuid7

from apihub.application.commands.api_key_commands import (
    CreateApiKey,
    DeleteApiKey,
    RevealApiKey,
    UpdateApiKey,
)
from apihub.application.dtos import ApiKeyResult, RevealedApiKeyResult
from apihub.core.result import Failure, Result, Success
from apihub.domain.entities import ApiKey
from apihub.domain.protocols.api_key_repository import ApiKeyRepository
from apihub.domain.protocols.encryption_protocol import EncryptionProtocol
from apihub.domain.protocols.logger_protocol import LoggerProtocol

NAME_MAX_LENGTH = 100
SERVICE_MAX_LENGTH = 100
ENVIRONMENT_MAX_LENGTH = 50


class ApiKeyCommandError:
    """API key command errors."""

    API_KEY_NOT_FOUND = "API key not found"
    INVALID_NAME = f"Name must be between 1 and {NAME_MAX_LENGTH} characters"
    INVALID_SERVICE = f"Service must be between 1 and {SERVICE_MAX_LENGTH} characters"
    INVALID_ENVIRONMENT = f"Environment must be at most {ENVIRONMENT_MAX_LENGTH} characters"
    EMPTY_KEY = "Key is required"
    ENCRYPTION_FAILED = "Failed to encrypt API key"
    DECRYPTION_FAILED = "Failed to decrypt API key"


def _validate_fields(
    *,
    name: str | None,
    service: str | None,
    key: str | None,
    environment: str | None,
) -> str | None:
    if name is not None and not 1 <= len(name) <= NAME_MAX_LENGTH:
        return ApiKeyCommandError.INVALID_NAME
    if service is not None and not 1 <= len(service) <= SERVICE_MAX_LENGTH:
        return ApiKeyCommandError.INVALID_SERVICE
    if key is not None and not key:
        return ApiKeyCommandError.EMPTY_KEY
    if environment is not None and len(environment) > ENVIRONMENT_MAX_LENGTH:
        return ApiKeyCommandError.INVALID_ENVIRONMENT
    return None


class CreateApiKeyHandler:
    """Handler for CreateApiKey command."""

    def __init__(
        self,
        api_key_repo: ApiKeyRepository,
        encryption: EncryptionProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_key_repo: API key repository.
            encryption: Encryption service.
            logger: Logger.
        """
        self._api_key_repo = api_key_repo
        self._encryption = encryption
        self._logger = logger

    async def handle(self, cmd: CreateApiKey) -> Result[ApiKeyResult, str]:
        """Handle CreateApiKey command.

        Args:
            cmd: CreateApiKey command.

        Returns:
            Success(ApiKeyResult): Key stored (metadata only).
            Failure(error): Invalid fields or encryption failure.
        """
        invalid = _validate_fields(
            name=cmd.name,
            service=cmd.service,
            key=cmd.key,
            environment=cmd.environment,
        )
        if invalid is not None:
            return Failure(error=invalid)

        encrypted = self._encryption.encrypt(cmd.key)
        if isinstance(encrypted, Failure):
            self._logger.error(
                "api_key_encryption_failed",
                service=cmd.service,
                reason=encrypted.error.message,
            )
            return Failure(error=ApiKeyCommandError.ENCRYPTION_FAILED)

        api_key = ApiKey(
            id=uuid7(),
            name=cmd.name,
            service=cmd.service,
            encrypted_key=encrypted.value,
            environment=cmd.environment or None,
            expires_at=cmd.expires_at,
        )
        await self._api_key_repo.save(api_key)

        self._logger.info(
            "api_key_created",
            api_key_id=str(api_key.id),
            service=api_key.service,
            environment=api_key.environment,
        )

        return Success(value=ApiKeyResult.from_entity(api_key))


class UpdateApiKeyHandler:
    """Handler for UpdateApiKey command."""

    def __init__(
        self,
        api_key_repo: ApiKeyRepository,
        encryption: EncryptionProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_key_repo: API key repository.
            encryption: Encryption service.
            logger: Logger.
        """
        self._api_key_repo = api_key_repo
        self._encryption = encryption
        self._logger = logger

    async def handle(self, cmd: UpdateApiKey) -> Result[ApiKeyResult, str]:
        """Handle UpdateApiKey command.

        Only fields set on the command are changed.

        Args:
            cmd: UpdateApiKey command.

        Returns:
            Success(ApiKeyResult): Updated key metadata.
            Failure(error): Unknown key, invalid fields or encryption failure.
        """
        invalid = _validate_fields(
            name=cmd.name,
            service=None,
            key=cmd.key,
            environment=cmd.environment,
        )
        if invalid is not None:
            return Failure(error=invalid)

        api_key = await self._api_key_repo.find_by_id(cmd.api_key_id)
        if api_key is None:
            return Failure(error=ApiKeyCommandError.API_KEY_NOT_FOUND)

        if cmd.key is not None:
            encrypted = self._encryption.encrypt(cmd.key)
            if isinstance(encrypted, Failure):
                self._logger.error(
                    "api_key_encryption_failed",
                    api_key_id=str(api_key.id),
                    reason=encrypted.error.message,
                )
                return Failure(error=ApiKeyCommandError.ENCRYPTION_FAILED)
            api_key.encrypted_key = encrypted.value

        if cmd.name is not None:
            api_key.name = cmd.name
        if cmd.environment is not None:
            api_key.environment = cmd.environment or None
        if cmd.expires_at is not None:
            api_key.expires_at = cmd.expires_at
        api_key.updated_at = datetime.now(UTC)

        await self._api_key_repo.save(api_key)

        self._logger.info(
            "api_key_updated",
            api_key_id=str(api_key.id),
            key_rotated=cmd.key is not None,
        )

        return Success(value=ApiKeyResult.from_entity(api_key))


class DeleteApiKeyHandler:
    """Handler for DeleteApiKey command."""

    def __init__(
        self,
        api_key_repo: ApiKeyRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_key_repo: API key repository.
            logger: Logger.
        """
        self._api_key_repo = api_key_repo
        self._logger = logger

    async def handle(self, cmd: DeleteApiKey) -> Result[None, str]:
        """Handle DeleteApiKey command.

        Returns:
            Success(None): Key deleted.
            Failure(error): Key does not exist.
        """
        if not await self._api_key_repo.delete(cmd.api_key_id):
            return Failure(error=ApiKeyCommandError.API_KEY_NOT_FOUND)

        self._logger.info("api_key_deleted", api_key_id=str(cmd.api_key_id))
        return Success(value=None)


class RevealApiKeyHandler:
    """Handler for RevealApiKey command.

    The only operation that returns plaintext key material.
    """

    def __init__(
        self,
        api_key_repo: ApiKeyRepository,
        encryption: EncryptionProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            api_key_repo: API key repository.
            encryption: Encryption service.
            logger: Logger.
        """
        self._api_key_repo = api_key_repo
        self._encryption = encryption
        self._logger = logger

    async def handle(self, cmd: RevealApiKey) -> Result[RevealedApiKeyResult, str]:
        """Handle RevealApiKey command.

        Args:
            cmd: RevealApiKey command.

        Returns:
            Success(RevealedApiKeyResult): Decrypted key.
            Failure(error): Unknown key or decryption failure.
        """
        api_key = await self._api_key_repo.find_by_id(cmd.api_key_id)
        if api_key is None:
            return Failure(error=ApiKeyCommandError.API_KEY_NOT_FOUND)

        decrypted = self._encryption.decrypt(api_key.encrypted_key)
        if isinstance(decrypted, Failure):
            self._logger.error(
                "api_key_decryption_failed",
                api_key_id=str(api_key.id),
                reason=decrypted.error.message,
            )
            return Failure(error=ApiKeyCommandError.DECRYPTION_FAILED)

        api_key.mark_used()
        await self._api_key_repo.save(api_key)

        self._logger.info("api_key_revealed", api_key_id=str(api_key.id))

        return Success(
            value=RevealedApiKeyResult(
                id=api_key.id,
                service=api_key.service,
                key=decrypted.value,
                last_used_at=api_key.last_used_at,
            )
        )
