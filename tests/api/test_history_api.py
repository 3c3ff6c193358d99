"""HTTP tests for request history endpoints."""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from apihub.application.dtos import HistoryEntryResult, HistoryPageResult
from apihub.application.queries.history_queries import ListHistory
from apihub.core.container import (
    get_get_history_entry_handler,
    get_list_history_handler,
    get_save_history_entry_handler,
)
from apihub.core.result import Failure, Success
from apihub.domain.entities import HistoryEntry
from tests.conftest import create_listing


def history_result(**overrides) -> HistoryEntryResult:
    api = overrides.pop("api", None)
    entry = HistoryEntry(
        id=uuid7(),
        method=overrides.pop("method", "GET"),
        url=overrides.pop("url", "https://pokeapi.co/api/v2/pokemon/ditto"),
        created_at=datetime(2026, 1, 15, 12, 0, tzinfo=UTC),
        **overrides,
    )
    return HistoryEntryResult.from_entity(entry, api)


@pytest.mark.api
class TestCreateHistoryEntry:
    """POST /api/v1/history."""

    def test_created(self, client, override):
        handler = override(
            get_save_history_entry_handler,
            Success(value=history_result(method="post", response_status=201)),
        )

        response = client.post(
            "/api/v1/history",
            json={
                "method": "post",
                "url": "https://pokeapi.co/api/v2/pokemon/ditto",
                "headers": {"Accept": "application/json"},
                "response_status": 201,
                "response_time": 120,
            },
        )

        assert response.status_code == 201
        assert response.json()["method"] == "post"
        assert response.json()["response_status"] == 201
        command = handler.handle.await_args.args[0]
        assert command.method == "post"
        assert command.headers == {"Accept": "application/json"}
        assert command.response_time == 120

    @pytest.mark.parametrize("field", ["method", "url"])
    def test_empty_required_field_is_422(self, client, override, field):
        handler = override(get_save_history_entry_handler, Failure(error="unused"))
        payload = {"method": "GET", "url": "https://x.io"}
        payload[field] = ""

        response = client.post("/api/v1/history", json=payload)

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == field
        handler.handle.assert_not_awaited()

    def test_method_outside_supported_verbs_is_accepted(self, client, override):
        handler = override(
            get_save_history_entry_handler,
            Success(value=history_result(method="PROPFIND")),
        )

        response = client.post(
            "/api/v1/history", json={"method": "PROPFIND", "url": "https://x.io"}
        )

        assert response.status_code == 201
        assert response.json()["method"] == "PROPFIND"
        assert handler.handle.await_args.args[0].method == "PROPFIND"

    def test_overlong_method_is_422(self, client, override):
        handler = override(get_save_history_entry_handler, Failure(error="unused"))

        response = client.post(
            "/api/v1/history", json={"method": "X" * 11, "url": "https://x.io"}
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "method"
        handler.handle.assert_not_awaited()

    def test_missing_method_from_handler_is_400(self, client, override):
        override(get_save_history_entry_handler, Failure(error="HTTP method is required"))

        response = client.post("/api/v1/history", json={"method": " ", "url": "https://x.io"})

        assert response.status_code == 400
        assert response.json()["title"] == "Validation Failed"

    def test_unknown_api_is_404(self, client, override):
        override(get_save_history_entry_handler, Failure(error="API not found"))

        response = client.post(
            "/api/v1/history",
            json={"method": "GET", "url": "https://x.io", "api_id": str(uuid7())},
        )

        assert response.status_code == 404

    def test_negative_response_time_is_422(self, client, override):
        override(get_save_history_entry_handler, Failure(error="unused"))

        response = client.post(
            "/api/v1/history",
            json={"method": "GET", "url": "https://x.io", "response_time": -1},
        )

        assert response.status_code == 422


@pytest.mark.api
class TestReadHistory:
    """GET /api/v1/history and /api/v1/history/{id}."""

    def test_list(self, client, override):
        user_id = uuid7()
        listing = create_listing("Dog CEO", category="Animals")
        handler = override(
            get_list_history_handler,
            Success(
                value=HistoryPageResult(
                    items=[history_result(api_id=listing.id, api=listing)],
                    next_cursor=None,
                )
            ),
        )

        response = client.get("/api/v1/history", params={"user_id": str(user_id)})

        body = response.json()
        assert response.status_code == 200
        assert body["next_cursor"] is None
        assert body["items"][0]["api"] == {
            "id": str(listing.id),
            "name": "Dog CEO",
            "category": "Animals",
        }
        handler.handle.assert_awaited_once_with(
            ListHistory(user_id=user_id, limit=20, cursor=None)
        )

    def test_list_limit_above_maximum(self, client, override):
        override(get_list_history_handler, Success(value=HistoryPageResult([], None)))

        assert client.get("/api/v1/history", params={"limit": 51}).status_code == 422

    def test_get(self, client, override):
        result = history_result(headers={"B": "2", "A": "1"})
        override(get_get_history_entry_handler, Success(value=result))

        response = client.get(f"/api/v1/history/{result.id}")

        assert response.status_code == 200
        assert list(response.json()["headers"]) == ["B", "A"]
        assert response.json()["api"] is None

    def test_get_not_found(self, client, override):
        override(get_get_history_entry_handler, Failure(error="History entry not found"))

        response = client.get(f"/api/v1/history/{uuid7()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "History entry not found"
