"""HTTP tests for the API key vault endpoints."""

from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from apihub.application.commands.handlers.api_key_handlers import ApiKeyCommandError
from apihub.application.dtos import ApiKeyResult, GroupCountResult, RevealedApiKeyResult
from apihub.application.queries.api_key_queries import ListApiKeys
from apihub.core.container import (
    get_create_api_key_handler,
    get_delete_api_key_handler,
    get_get_api_key_handler,
    get_list_api_key_services_handler,
    get_list_api_keys_handler,
    get_reveal_api_key_handler,
    get_update_api_key_handler,
)
from apihub.core.result import Failure, Success
from apihub.domain.entities import ApiKey


def key_result(**overrides) -> ApiKeyResult:
    values = {
        "id": uuid7(),
        "name": "GitHub token",
        "service": "GitHub",
        "encrypted_key": b"\x00" * 40,
        "environment": "production",
    }
    values.update(overrides)
    return ApiKeyResult.from_entity(ApiKey(**values))


@pytest.mark.api
class TestApiKeyWrites:
    """Create, update, delete and reveal."""

    def test_create_never_returns_secret(self, client, override):
        handler = override(get_create_api_key_handler, Success(value=key_result()))

        response = client.post(
            "/api/v1/api-keys",
            json={"name": "GitHub token", "service": "GitHub", "key": "ghp_secret"},
        )

        assert response.status_code == 201
        assert response.json()["service"] == "GitHub"
        assert response.json()["is_expired"] is False
        assert "ghp_secret" not in response.text
        assert "key" not in response.json()
        assert handler.handle.await_args.args[0].key == "ghp_secret"

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "service": "GitHub", "key": "k"},
            {"name": "x" * 101, "service": "GitHub", "key": "k"},
            {"name": "n", "service": "GitHub", "key": ""},
            {"name": "n", "service": "GitHub"},
        ],
    )
    def test_create_invalid_payload_is_422(self, client, override, payload):
        handler = override(get_create_api_key_handler, Failure(error="unused"))

        assert client.post("/api/v1/api-keys", json=payload).status_code == 422
        handler.handle.assert_not_awaited()

    def test_create_validation_failure_is_400(self, client, override):
        override(get_create_api_key_handler, Failure(error=ApiKeyCommandError.EMPTY_KEY))

        response = client.post(
            "/api/v1/api-keys", json={"name": "n", "service": "s", "key": " "}
        )

        assert response.status_code == 400

    def test_update(self, client, override):
        api_key = key_result(name="Renamed")
        handler = override(get_update_api_key_handler, Success(value=api_key))

        response = client.patch(f"/api/v1/api-keys/{api_key.id}", json={"name": "Renamed"})

        assert response.status_code == 200
        assert response.json()["name"] == "Renamed"
        command = handler.handle.await_args.args[0]
        assert command.api_key_id == api_key.id
        assert command.key is None

    def test_update_not_found(self, client, override):
        override(
            get_update_api_key_handler, Failure(error=ApiKeyCommandError.API_KEY_NOT_FOUND)
        )

        response = client.patch(f"/api/v1/api-keys/{uuid7()}", json={"name": "x"})

        assert response.status_code == 404

    def test_delete(self, client, override):
        override(get_delete_api_key_handler, Success(value=None))

        response = client.delete(f"/api/v1/api-keys/{uuid7()}")

        assert response.status_code == 204
        assert response.content == b""

    def test_delete_not_found(self, client, override):
        override(
            get_delete_api_key_handler, Failure(error=ApiKeyCommandError.API_KEY_NOT_FOUND)
        )

        response = client.delete(f"/api/v1/api-keys/{uuid7()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "API key not found"

    def test_reveal(self, client, override):
        key_id = uuid7()
        used_at = datetime(2026, 3, 1, 9, 30, tzinfo=UTC)
        override(
            get_reveal_api_key_handler,
            Success(
                value=RevealedApiKeyResult(
                    id=key_id, service="GitHub", key="ghp_secret", last_used_at=used_at
                )
            ),
        )

        response = client.post(f"/api/v1/api-keys/{key_id}/reveals")

        assert response.status_code == 200
        assert response.json()["key"] == "ghp_secret"
        assert response.json()["last_used_at"].startswith("2026-03-01T09:30:00")

    def test_reveal_decryption_failure_is_500(self, client, override):
        override(
            get_reveal_api_key_handler, Failure(error=ApiKeyCommandError.DECRYPTION_FAILED)
        )

        response = client.post(f"/api/v1/api-keys/{uuid7()}/reveals")

        assert response.status_code == 500
        assert response.json()["title"] == "Command Execution Failed"


@pytest.mark.api
class TestApiKeyReads:
    """List, get and services."""

    def test_list_passes_filters(self, client, override):
        expired = key_result(expires_at=datetime.now(UTC) - timedelta(days=1))
        handler = override(get_list_api_keys_handler, Success(value=[expired]))

        response = client.get(
            "/api/v1/api-keys", params={"service": "GitHub", "environment": ""}
        )

        assert response.status_code == 200
        assert response.json()["items"][0]["is_expired"] is True
        handler.handle.assert_awaited_once_with(
            ListApiKeys(service="GitHub", environment=None)
        )

    def test_get_not_found(self, client, override):
        override(get_get_api_key_handler, Failure(error="API key not found"))

        assert client.get(f"/api/v1/api-keys/{uuid7()}").status_code == 404

    def test_services(self, client, override):
        override(
            get_list_api_key_services_handler,
            Success(
                value=[
                    GroupCountResult(name="GitHub", count=2),
                    GroupCountResult(name="OpenAI", count=1),
                ]
            ),
        )

        response = client.get("/api/v1/api-key-services")

        assert response.json() == {
            "items": [{"name": "GitHub", "count": 2}, {"name": "OpenAI", "count": 1}]
        }
