"""Unit tests for API key vault handlers.

A real EncryptionService is used so the tests check actual ciphertext
round trips; only the repository is mocked.
"""

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from uuid_extensions import uuid7

from apihub.application.commands.api_key_commands import (
    CreateApiKey,
    DeleteApiKey,
    RevealApiKey,
    UpdateApiKey,
)
from apihub.application.commands.handlers.api_key_handlers import (
    ApiKeyCommandError,
    CreateApiKeyHandler,
    DeleteApiKeyHandler,
    RevealApiKeyHandler,
    UpdateApiKeyHandler,
)
from apihub.application.queries.api_key_queries import (
    GetApiKey,
    ListApiKeys,
    ListApiKeyServices,
)
from apihub.application.queries.handlers.api_key_handlers import (
    ApiKeyQueryError,
    GetApiKeyHandler,
    ListApiKeysHandler,
    ListApiKeyServicesHandler,
)
from apihub.core.result import Failure, Success
from apihub.domain.entities import ApiKey
from apihub.domain.protocols.api_key_repository import ApiKeyRepository
from apihub.domain.value_objects import GroupCount
from apihub.infrastructure.security.encryption_service import EncryptionService


@pytest.fixture
def encryption():
    return EncryptionService.create(os.urandom(32)).value


@pytest.fixture
def api_key_repo():
    return AsyncMock(spec=ApiKeyRepository)


@pytest.fixture
def logger():
    return MagicMock()


def stored_key(encryption: EncryptionService, secret: str = "sk_test_123", **overrides) -> ApiKey:
    """Helper to create an ApiKey whose ciphertext decrypts to ``secret``."""
    return ApiKey(
        id=overrides.pop("id", uuid7()),
        name=overrides.pop("name", "Primary"),
        service=overrides.pop("service", "GitHub"),
        encrypted_key=encryption.encrypt(secret).value,
        **overrides,
    )


@pytest.mark.unit
class TestCreateApiKeyHandler:
    """Tests for CreateApiKeyHandler."""

    async def test_stores_ciphertext_only(self, api_key_repo, encryption, logger):
        handler = CreateApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(
            CreateApiKey(name="CI token", service="GitHub", key="ghp_secret", environment="")
        )

        assert isinstance(result, Success)
        assert result.value.name == "CI token"
        assert result.value.environment is None
        assert result.value.is_expired is False
        assert not hasattr(result.value, "key")

        saved = api_key_repo.save.await_args.args[0]
        assert b"ghp_secret" not in saved.encrypted_key
        assert encryption.decrypt(saved.encrypted_key).value == "ghp_secret"
        assert "ghp_secret" not in repr(logger.info.call_args_list)

    @pytest.mark.parametrize(
        ("command", "error"),
        [
            (CreateApiKey(name="", service="GitHub", key="k"), ApiKeyCommandError.INVALID_NAME),
            (CreateApiKey(name="x" * 101, service="GitHub", key="k"), ApiKeyCommandError.INVALID_NAME),
            (CreateApiKey(name="n", service="", key="k"), ApiKeyCommandError.INVALID_SERVICE),
            (CreateApiKey(name="n", service="s", key=""), ApiKeyCommandError.EMPTY_KEY),
            (
                CreateApiKey(name="n", service="s", key="k", environment="e" * 51),
                ApiKeyCommandError.INVALID_ENVIRONMENT,
            ),
        ],
    )
    async def test_invalid_fields(self, api_key_repo, encryption, logger, command, error):
        handler = CreateApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(command)

        assert isinstance(result, Failure)
        assert result.error == error
        api_key_repo.save.assert_not_awaited()


@pytest.mark.unit
class TestUpdateApiKeyHandler:
    """Tests for UpdateApiKeyHandler."""

    async def test_partial_update_keeps_secret(self, api_key_repo, encryption, logger):
        existing = stored_key(encryption, environment="staging")
        original_ciphertext = existing.encrypted_key
        api_key_repo.find_by_id.return_value = existing
        handler = UpdateApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(UpdateApiKey(api_key_id=existing.id, name="Renamed"))

        assert isinstance(result, Success)
        assert result.value.name == "Renamed"
        assert result.value.environment == "staging"
        assert existing.encrypted_key == original_ciphertext

    async def test_rotating_key_re_encrypts(self, api_key_repo, encryption, logger):
        existing = stored_key(encryption)
        api_key_repo.find_by_id.return_value = existing
        handler = UpdateApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(UpdateApiKey(api_key_id=existing.id, key="sk_new"))

        assert isinstance(result, Success)
        assert encryption.decrypt(existing.encrypted_key).value == "sk_new"
        api_key_repo.save.assert_awaited_once_with(existing)

    async def test_unknown_key(self, api_key_repo, encryption, logger):
        api_key_repo.find_by_id.return_value = None
        handler = UpdateApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(UpdateApiKey(api_key_id=uuid7(), name="x"))

        assert isinstance(result, Failure)
        assert result.error == ApiKeyCommandError.API_KEY_NOT_FOUND


@pytest.mark.unit
class TestDeleteApiKeyHandler:
    """Tests for DeleteApiKeyHandler."""

    async def test_deleted(self, api_key_repo, logger):
        api_key_repo.delete.return_value = True
        handler = DeleteApiKeyHandler(api_key_repo=api_key_repo, logger=logger)

        result = await handler.handle(DeleteApiKey(api_key_id=uuid7()))

        assert isinstance(result, Success)
        assert result.value is None

    async def test_unknown_key(self, api_key_repo, logger):
        api_key_repo.delete.return_value = False
        handler = DeleteApiKeyHandler(api_key_repo=api_key_repo, logger=logger)

        result = await handler.handle(DeleteApiKey(api_key_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error == ApiKeyCommandError.API_KEY_NOT_FOUND


@pytest.mark.unit
class TestRevealApiKeyHandler:
    """Tests for RevealApiKeyHandler."""

    async def test_reveals_and_stamps_last_use(self, api_key_repo, encryption, logger):
        existing = stored_key(encryption, secret="sk_live_abc", service="Stripe")
        api_key_repo.find_by_id.return_value = existing
        handler = RevealApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(RevealApiKey(api_key_id=existing.id))

        assert isinstance(result, Success)
        assert result.value.key == "sk_live_abc"
        assert result.value.service == "Stripe"
        assert result.value.last_used_at is not None
        api_key_repo.save.assert_awaited_once_with(existing)
        assert "sk_live_abc" not in repr(logger.info.call_args_list)

    async def test_tampered_ciphertext(self, api_key_repo, encryption, logger):
        existing = stored_key(encryption)
        existing.encrypted_key = existing.encrypted_key[:-1] + bytes(
            [existing.encrypted_key[-1] ^ 0x01]
        )
        api_key_repo.find_by_id.return_value = existing
        handler = RevealApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(RevealApiKey(api_key_id=existing.id))

        assert isinstance(result, Failure)
        assert result.error == ApiKeyCommandError.DECRYPTION_FAILED
        api_key_repo.save.assert_not_awaited()
        logger.error.assert_called_once()

    async def test_unknown_key(self, api_key_repo, encryption, logger):
        api_key_repo.find_by_id.return_value = None
        handler = RevealApiKeyHandler(
            api_key_repo=api_key_repo, encryption=encryption, logger=logger
        )

        result = await handler.handle(RevealApiKey(api_key_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error == ApiKeyCommandError.API_KEY_NOT_FOUND


@pytest.mark.unit
class TestApiKeyQueryHandlers:
    """Tests for the read-only API key handlers."""

    async def test_list_passes_filters(self, api_key_repo, encryption):
        expired = stored_key(encryption, expires_at=datetime.now(UTC) - timedelta(days=1))
        api_key_repo.list_all.return_value = [expired]
        handler = ListApiKeysHandler(api_key_repo=api_key_repo)

        result = await handler.handle(ListApiKeys(service="GitHub", environment=""))

        assert isinstance(result, Success)
        assert result.value[0].is_expired is True
        api_key_repo.list_all.assert_awaited_once_with(service="GitHub", environment=None)

    async def test_get_not_found(self, api_key_repo):
        api_key_repo.find_by_id.return_value = None
        handler = GetApiKeyHandler(api_key_repo=api_key_repo)

        result = await handler.handle(GetApiKey(api_key_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error == ApiKeyQueryError.API_KEY_NOT_FOUND

    async def test_services(self, api_key_repo):
        api_key_repo.list_services.return_value = [
            GroupCount(name="GitHub", count=2),
            GroupCount(name="Stripe", count=1),
        ]
        handler = ListApiKeyServicesHandler(api_key_repo=api_key_repo)

        result = await handler.handle(ListApiKeyServices())

        assert isinstance(result, Success)
        assert [(group.name, group.count) for group in result.value] == [
            ("GitHub", 2),
            ("Stripe", 1),
        ]
